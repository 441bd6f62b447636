from .gateway import BackendGateway, HttpBackendGateway

__all__ = ["BackendGateway", "HttpBackendGateway"]
