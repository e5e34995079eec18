"""Calorie banking and overeating recovery service."""
