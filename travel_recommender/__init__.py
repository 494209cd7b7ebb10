"""
Personalized travel recommendations powered by Google Gemini.

A client composer collects a text profile, a destination city and up to
five images; a stateless gateway turns them into one multimodal Gemini
request and relays three structured recommendations back.
"""

__version__ = "0.1.0"
