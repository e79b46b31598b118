import random
import re
import sys

from errors import InvalidConfiguration

# Page ids run from 0 to VIRTUAL_PAGES - 1
VIRTUAL_PAGES = 10
MAX_PHYSICAL_FRAMES = 7


def is_integer(value):
    # bool is an int subclass but never a page number or frame count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_reference_string(references, virtual_pages=VIRTUAL_PAGES):
    for page in references:
        if not is_integer(page):
            raise InvalidConfiguration(f"Page {page!r} is not an integer")
        if not 0 <= page < virtual_pages:
            raise InvalidConfiguration(
                f"Page {page} out of range, must be between 0 and {virtual_pages - 1}")
    return references


def parse_reference_string(text, virtual_pages=VIRTUAL_PAGES, strict=True):
    """
    Parse a space or comma separated list of page numbers.

    With strict=False, non-integer and out-of-range tokens are reported on
    stderr and skipped instead of rejecting the whole string.
    """
    references = []
    for token in re.split(r'[\s,]+', text.strip()):
        if not token:
            continue
        try:
            page = int(token)
        except ValueError:
            if strict:
                raise InvalidConfiguration(f"Non-integer entered: {token}") from None
            print(f"Non-integer entered: {token}", file=sys.stderr)
            continue

        if not 0 <= page < virtual_pages:
            message = f"Number must be between 0 and {virtual_pages - 1}. {token} ignored."
            if strict:
                raise InvalidConfiguration(message)
            print(message, file=sys.stderr)
            continue

        references.append(page)

    if not references:
        raise InvalidConfiguration("Please enter at least one valid number.")
    return references


def generate_reference_string(length, virtual_pages=VIRTUAL_PAGES, seed=None):
    if length < 1:
        raise InvalidConfiguration("Length must be at least one.")
    rng = random.Random(seed)
    return [rng.randrange(virtual_pages) for _ in range(length)]
