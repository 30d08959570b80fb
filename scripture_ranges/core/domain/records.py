"""
Records — pydantic модели структурированной записи диапазона

Компактный формат сериализации:

    {
      "start": {"book": <position>, "chapter": <int>, "verse": <int, нет если 1>},
      "end":   {"book": <position>, "chapter": <int>, "verse": <int, нет если последний стих главы>},
      "exclude": [{"start": {...}, "end": {...}}, ...]   # нет если пусто
    }

    RangeCollection: {"ranges": [...], "name"?: str, "id"?: str}

Пропущенные поля кодируются как None и удаляются через
model_dump(exclude_none=True). Пустая строка в name/id — присутствующее значение.
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# NESTED MODELS
# =============================================================================


class VerseBoundRecord(BaseModel):
    """Граница исключения: глава и (опционально) стих."""

    chapter: int = Field(..., gt=0, description="Номер главы")
    verse: int | None = Field(None, gt=0, description="Номер стиха (None = граница главы)")

    model_config = {"frozen": True}


class BookBoundRecord(VerseBoundRecord):
    """Граница основного диапазона: позиция книги, глава и (опционально) стих."""

    book: int = Field(..., gt=0, description="Позиция книги")


class ExclusionRecord(BaseModel):
    """Исключение внутри диапазона."""

    start: VerseBoundRecord
    end: VerseBoundRecord

    model_config = {"frozen": True}


# =============================================================================
# RANGE RECORD
# =============================================================================


class RangeRecord(BaseModel):
    """Запись диапазона ScriptureRange."""

    start: BookBoundRecord
    end: BookBoundRecord
    exclude: list[ExclusionRecord] | None = Field(
        None, description="Исключения (None если нет)"
    )

    model_config = {"frozen": True}

    @field_validator("end")
    @classmethod
    def validate_same_book(cls, v: BookBoundRecord, info) -> BookBoundRecord:
        """start.book и end.book должны совпадать."""
        if "start" in info.data:
            start_book = info.data["start"].book
            if v.book != start_book:
                raise ValueError(f"end.book {v.book} must equal start.book {start_book}")
        return v

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class RangeCollectionRecord(BaseModel):
    """Запись набора диапазонов."""

    ranges: list[RangeRecord] = Field(default_factory=list)
    name: str | None = None
    id: str | None = None

    model_config = {"frozen": True}

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)
