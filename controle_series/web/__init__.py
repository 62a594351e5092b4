"""Interface web FastAPI de Controle Series."""
