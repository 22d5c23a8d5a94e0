from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Referenced category entity. Owned by the category service; read-only here."""
    id: Optional[str]
    name: str
