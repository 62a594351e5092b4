"""Controle Series - gestion de séries TV, saisons et épisodes vus."""
