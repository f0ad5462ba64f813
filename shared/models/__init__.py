# Import all models to ensure they are registered with SQLAlchemy
from .users import Users
from .spaces import Space
from .reviews import Review
