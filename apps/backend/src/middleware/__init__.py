from .cors import CorsPolicyMiddleware

__all__ = ["CorsPolicyMiddleware"]
