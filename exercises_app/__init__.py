"""
Exercises App - Typed Language Exercises

A small library of self-contained exercises: classifying ages, computing
a movie's profit, totalling product prices and greeting one or many names.
Each exercise is a pure function over immutable records.
"""

__version__ = "0.1.0"
__author__ = "Exercises Team"
