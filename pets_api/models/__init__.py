# Models package init
from pets_api.models.pet import Pet

__all__ = ["Pet"]
