from app.mailer.domain.factories.address_factory import AddressFactory

__all__ = ["AddressFactory"]
