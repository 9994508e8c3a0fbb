"""Hello backend application package.

Holds the message domain entity, the use case producing it, the FastAPI
interface serving it and the display client consuming it.
"""
