# pylint: disable=unused-import
# flake8: noqa: F401
# ruff: noqa: F401
import sys
from typing import (
    Any,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self
