from .base import Base
from .connection import engine, SessionLocal
