from src.crm.domain.model.customer import Customer

__all__ = ["Customer"]
