"""
Prompt templates for the Travel Recommender.
"""
