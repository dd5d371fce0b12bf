"""Search dictionary ORM model. Derived vocabulary for typo correction."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin


class SearchDictionaryWord(TimestampMixin, Base):
    """One lowercase dictionary word. Table: search_dictionary.

    Rebuilt wholesale from the catalog; never edited row by row.
    """

    __tablename__ = "search_dictionary"

    word: Mapped[str] = mapped_column(String(255), primary_key=True)
