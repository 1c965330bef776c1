"""Scoring primitives for the learning-style and well-being quizzes."""
