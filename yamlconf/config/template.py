import string

from ..common import compat_typing as t

PLACEHOLDER = '{}'


class TemplateError(ValueError):
    """The template could not be filled with the given values"""


class _LiteralKeyFormatter(string.Formatter):
    # Look up the whole field name as a key, "a.b" and "a[0]" are plain names here
    def get_field(self, field_name: str, args: t.Sequence[t.Any], kwargs: t.Mapping[str, t.Any]) -> t.Tuple[t.Any, str]:
        return kwargs[field_name], field_name


_formatter = _LiteralKeyFormatter()


def name_placeholders(template: str, names: t.Sequence[str]) -> str:
    """Replace the anonymous placeholders of a template with named ones, in order

    ``name_placeholders('{}:{}', ['host', 'port'])`` returns ``'{host}:{port}'``.

    Args:
        template (str): template with "{}" placeholders
        names (Sequence[str]): one name for each placeholder

    Raises:
        TemplateError: the number of placeholders does not match the number of names

    Returns:
        str: template with named placeholders
    """
    count = template.count(PLACEHOLDER)
    if count != len(names):
        raise TemplateError(f'Template {template!r} has {count} placeholders, got {len(names)} names')
    fmt = template
    for name in names:
        fmt = fmt.replace(PLACEHOLDER, '{' + name + '}', 1)
    return fmt


def substitute(fmt: str, values: t.Mapping[str, str]) -> str:
    """Fill the named placeholders of fmt from values

    Raises:
        TemplateError: a placeholder has no value or fmt is malformed
    """
    try:
        return _formatter.vformat(fmt, (), values)
    except KeyError as e:
        raise TemplateError(f'No value for placeholder {e} in {fmt!r}') from e
    except (IndexError, ValueError) as e:
        raise TemplateError(f'Malformed template {fmt!r}: {e}') from e
