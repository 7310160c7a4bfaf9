"""
Test data generators for JSON repair benchmarks.

Creates broken JSON documents of the kind LLMs and hand-edited feeds emit:
- Different sizes (single object up to thousands of array items)
- Different defect mixes (quotes, Python literals, trailing commas)
- Unterminated deep nesting and non-ASCII content
"""

import json
import random
import string

import jsonmend

_LITERALS = ("True", "False", "None")

BROKEN_SAMPLES = (
    "simple_quotes",
    "medium_nested",
    "large_array",
    "deep_nesting",
    "large_object",
    "complex_mixed",
    "very_large_array",
    "unicode",
)


def generate_broken_data(data_type: str) -> str:
    """Generates broken JSON text based on specified type."""
    generators = {
        "simple_quotes": _generate_simple_quotes,
        "medium_nested": _generate_medium_nested,
        "large_array": _generate_large_array,
        "deep_nesting": _generate_deep_nesting,
        "large_object": _generate_large_object,
        "complex_mixed": _generate_complex_mixed,
        "very_large_array": _generate_very_large_array,
        "unicode": _generate_unicode,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def generate_valid_data(data_type: str) -> str:
    """
    Generates the strict JSON equivalent of a broken sample.

    Used to measure the fast path against strict parsers on the same shape
    of data.
    """
    value = jsonmend.loads(generate_broken_data(data_type))
    return json.dumps(value, ensure_ascii=False)


def _generate_simple_quotes() -> str:
    """Generates a small object using single quotes throughout."""
    return "{'name': 'John', 'age': 30, 'city': 'New York'}"


def _generate_medium_nested() -> str:
    """Generates a nested document with Python literals and bare keys."""
    return """
    {
      'users': [
        {'id': 1, 'name': 'Alice', active: True, 'tags': ['admin', 'user']},
        {'id': 2, 'name': 'Bob', active: False, 'tags': ['user']},
        {'id': 3, 'name': 'Charlie', active: None, 'tags': ['mod', 'user']}
      ],
      'metadata': {
        'total': 3,
        'page': 1,
        last_updated: '2024-01-01'
      }
    }
    """


def _generate_large_array() -> str:
    """Generates a 1000-item integer array with a trailing comma."""
    return "[" + ",".join(str(i) for i in range(1000)) + ",]"


def _generate_deep_nesting() -> str:
    """Generates 50 nested objects with every closing brace missing."""
    levels = "".join(f"'level_{i}': {{" for i in range(50))
    return "{" + levels + "'data': 'deep'"


def _generate_large_object() -> str:
    """Generates an object with 500 unquoted keys and mixed values."""
    members = []
    for i in range(500):
        value = random.choice(
            [f"'string_{i}'", str(random.randint(0, 999)), *_LITERALS]
        )
        members.append(f"key_{i}: {value}")
    return "{" + ", ".join(members) + ",}"


def _generate_complex_mixed() -> str:
    """Generates a document mixing every common defect."""
    return """
    {
      users: [
        {id: 1, name: 'Alice', email: "alice@example.com", active: True,},
        {id: 2, name: 'Bob', email: "bob@example.com", active: False,},
        {id: 3, name: 'Charlie', email: "c@example.com", active: True,}
      ],
      'settings': {
        'theme': 'dark',
        notifications: {
          email: True,
          push: False,
          sms: None
        },
        'preferences': [
          'option1',
          'option2',
          'option3',
        ]
      },
      metadata: {
        version: '1.0.0',
        'timestamp': 1234567890,
        tags: ['production', 'v1', 'stable',],
      }
    }
    """


def _generate_very_large_array() -> str:
    """Generates 5000 objects with unquoted keys and bare string values."""
    items = []
    for i in range(5000):
        tags = ", ".join(
            f"'tag_{j}'" for j in range(random.randint(1, 5))
        )
        items.append(
            f"{{id: {i}, name: {_random_string(10)}, "
            f"value: {random.random()}, "
            f"active: {random.choice(_LITERALS)}, tags: [{tags}]}}"
        )
    return "[" + ", ".join(items) + ",]"


def _generate_unicode() -> str:
    """Generates a document with CJK, emoji and right-to-left text."""
    return """
    {
      'message': '你好世界',
      'emoji': '😀🎉🚀',
      'special': 'Line\\nbreak\\ttab',
      data: {
        'japanese': '日本語',
        'korean': '한국어',
        'arabic': 'العربية',
        numbers: [1, 2, 3,],
      }
    }
    """


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_lowercase, k=length))
