from initializr.client.client import InitializrClient

__all__ = ["InitializrClient"]
