class InvalidEncoding(ValueError):
    """Text is not well-formed Unicode once lowercased."""


def normalize(text: str | bytes) -> str:
    # Keys and queries both go through here so they fold the same way
    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f'{text!r} is not valid UTF-8') from e
    elif not isinstance(text, str):
        raise InvalidEncoding(f'Expected text, got {type(text).__name__}')
    lowered = text.lower()
    try:
        lowered.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidEncoding(f'{text!r} contains unpaired surrogates') from e
    return lowered


def code_points(text: str | bytes) -> list[int]:
    return [ord(c) for c in normalize(text)]
