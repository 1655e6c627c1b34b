from logger import warning
from models.fastmatching import FastMatching

class SubstringSearcher:
    def __init__(self, string_list: list[str]) -> None:
        self.strings = []
        self.index = FastMatching()
        for s in string_list:
            self.add(s)

    def add(self, s: str) -> bool:
        # Values are positions in self.strings
        if not self.index.register(s, len(self.strings)):
            warning(f'Skipping unsearchable name {s!r}')
            return False
        self.strings.append(s)
        return True

    def get(self, query: str) -> list[str]:
        # dict keeps first-match order while dropping repeats
        hits = dict.fromkeys(self.index.retrieve(query))
        return [self.strings[idx] for idx in hits]
