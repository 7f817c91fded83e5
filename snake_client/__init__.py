"""Pygame front end for the snake game."""
