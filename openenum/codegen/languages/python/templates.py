"""
Built-in templates for Python enum generation.
"""

MODULE_HEADER_TEMPLATE = '''\
{% if module_docs %}
"""
{{ module_docs }}
"""

{% endif %}
{% if add_header %}
# Code generated by openenum. DO NOT EDIT.

{% endif %}
from __future__ import annotations

from typing import {{ typing_imports | join(", ") }}
'''

CLASS_TEMPLATE = '''\
{{ metadata }}class {{ enum_name }}:
    """{{ summary }}
{% if docs %}

{{ docs | indent(4) }}
{% endif %}
    """

    __slots__ = ("_name", "_value")

{% for variant in variants %}
    {{ variant.name }}: ClassVar[{{ enum_name }}]
{% if variant.docs %}
    """{{ variant.docs }}"""
{% endif %}
{% endfor %}

    def __init__(self, name: str, value: str | {{ unknown_value }}) -> None:
        self._name = name
        self._value = value

{{ additional_members | indent(4) }}

{{ from_impl | indent(4) }}

{{ from_str_impl | indent(4) }}

    def as_str(self) -> str:
        """Returns the string value of the enum member."""
        match self._value:
{{ additional_as_str_arms | indent(12) }}
            case str() as value:
                return value

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Returns all the string representations of the enum members."""
        return ({{ values | join(", ") }},)

    @property
    def name(self) -> str:
        """Name of the variant."""
        return self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, {{ enum_name }}):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, {{ unknown_value }}):
            return f"{{ enum_name }}.{{ unknown_variant }}({self._value!r})"
        return f"{{ enum_name }}.{self._name}"

    def __str__(self) -> str:
        return self.as_str()


{% for variant in variants %}
{{ enum_name }}.{{ variant.name }} = {{ enum_name }}({{ variant.name_literal }}, {{ variant.value }})
{% endfor %}
'''

FOOTER_TEMPLATE = '''\
__all__ = [
{% for name in exports %}
    "{{ name }}",
{% endfor %}
]
'''

PYTHON_TEMPLATES = {
    "module_header.py.j2": MODULE_HEADER_TEMPLATE,
    "class.py.j2": CLASS_TEMPLATE,
    "footer.py.j2": FOOTER_TEMPLATE,
}
