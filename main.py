from pathlib import Path
from typing import TextIO
import json
import sys

from models.substringsearcher import SubstringSearcher
from logger import info
from config import config

CHOICES_FILE_PATH = Path(__file__).parent / config['choicesFile']

def load_choices(path: Path) -> list[str]:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)['locations']

def format_matches(query: str, matches: list[str]) -> str:
    return f"{query}: {', '.join(matches) if matches else 'no matches'}"

def run(searcher: SubstringSearcher, queries: TextIO, out: TextIO) -> int:
    answered = 0
    for line in queries:
        query = line.rstrip('\r\n')
        matches = searcher.get(query)
        info(f'Query {query!r} matched {len(matches)} names')
        print(format_matches(query, matches), file=out)
        answered += 1
    return answered

def main(argv: list[str]) -> int:
    path = Path(argv[0]) if argv else CHOICES_FILE_PATH
    names = load_choices(path)
    info(f'Loaded {len(names)} names from {path}')
    run(SubstringSearcher(names), sys.stdin, sys.stdout)
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
