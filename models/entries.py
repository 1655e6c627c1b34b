from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]

# (suffix, value); plain tuples so the search list stays cheap to build and sort
SuffixRecord = tuple[str, int]

class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: Int32

    def suffixes(self) -> list[SuffixRecord]:
        return [(self.key[i:], self.value) for i in range(len(self.key))]

    def __str__(self):
        return f"{self.key!r} -> {self.value}"
