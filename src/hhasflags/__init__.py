"""hhasflags: flag names for the HipHop bytecode assembly format.

Maps attribute, type-constraint and FCall flag bitmasks to the
space-separated names written in HHAS text, and back.
"""

from .attr import ALL_CONTEXTS as ALL_CONTEXTS
from .attr import Attr as Attr
from .attr import AttrContext as AttrContext
from .decoder import UnknownFlagError as UnknownFlagError
from .decoder import attrs_to_string as attrs_to_string
from .decoder import attrs_to_vec as attrs_to_vec
from .decoder import fcall_flags_to_string as fcall_flags_to_string
from .decoder import legal_attrs as legal_attrs
from .decoder import string_to_attrs as string_to_attrs
from .decoder import string_to_fcall_flags as string_to_fcall_flags
from .decoder import string_to_type_flags as string_to_type_flags
from .decoder import type_flags_to_string as type_flags_to_string
from .flags import FCallArgsFlags as FCallArgsFlags
from .flags import TypeConstraintFlags as TypeConstraintFlags

__version__ = "0.1.0"
