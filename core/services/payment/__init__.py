from .service import PaymentService

__all__ = ["PaymentService"]
