from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/database/models/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~
Modèles ORM (register for Alembic).
"""

from .user import User
from .texte import Texte
from .exposition import Exposition
from .travaux import Travaux
from .section_travaux import SectionTravaux
from .section_about import SectionAbout
from .about import About, about_sections
from .image import Image

__all__ = [
    "User",
    "Texte",
    "Image",
    "Exposition",
    "Travaux",
    "SectionTravaux",
    "About",
    "about_sections",
    "SectionAbout",
]
