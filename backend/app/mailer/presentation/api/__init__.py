# FastAPI routers - addresses, health
from app.mailer.presentation.api import addresses, health

__all__ = ["addresses", "health"]
