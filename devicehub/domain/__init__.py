"""
Domain layer: the device entity, its lifecycle rules, the repository
contract and the domain exceptions. Nothing here depends on FastAPI or MongoDB.
"""
