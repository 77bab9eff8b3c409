"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream without knowing anything about its neighbours (apart from
the ones it declares a Dependency on).
"""
import logging
import struct
from enum import Enum

from bitstring import BitArray

from .meta import FieldBase, Endianess, ENDIANESS_PREFIX
from .properties import ChunkPhase, PropertyDescriptor
from .exceptions import UnpackException, ChunkUnpackException


logger = logging.getLogger(__name__)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, offset=None, endianess=Endianess.BIG_ENDIAN):
        super().__init__()
        self._phase = ChunkPhase.INIT
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself;
    values not present in the enum are kept as plain integers.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if isinstance(self.value, Enum):
            return f'<{self.__class__.__name__}({self.value!r})>'

        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '%s%s' % (ENDIANESS_PREFIX[self.endianess], self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _unpack_enum(self, value: int):
        try:
            return self.enum(value)
        except ValueError:
            logger.debug(f'enum {self.enum!r} doesn\'t have element with value 0x{value:x} in it')

        return value

    def _unpack(self, raw):
        value = struct.unpack(self.get_format(), raw)[0]
        if self.enum:
            value = self._unpack_enum(value)

        return value

    def unpack(self, stream):
        self._phase = ChunkPhase.UNPACKING
        self.value = self._unpack(stream.read_exactly(self.size))
        self._phase = ChunkPhase.DONE


class BitField(Field):
    """Unsigned big-endian integers packed at bit level, described with
    a bitstring-like format, e.g.

        BitField('uint:24, uint:8')

    reads four bytes as a big-endian 24 bits integer followed by an 8 bits one;
    the value is the tuple of the integers."""

    def __init__(self, format, **kw):
        self.format = format
        tokens = [token.strip().split(':') for token in format.split(',')]
        if any(kind != 'uint' for kind, _ in tokens):
            raise ValueError(f'only uint sub-fields are supported, got \'{format}\'')

        self._lengths = [int(length) for _, length in tokens]

        if sum(self._lengths) % 8:
            raise ValueError(f'format \'{format}\' doesn\'t cover a whole number of bytes')

        super().__init__(default=tuple(0 for _ in self._lengths), **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ', '.join(hex(_) for _ in self.value))

    def _get_size(self):
        return sum(self._lengths) // 8

    def unpack(self, stream):
        self._phase = ChunkPhase.UNPACKING
        raw = stream.read_exactly(self.size)
        bits = BitArray(bytes=raw)

        values = []
        position = 0
        for length in self._lengths:
            values.append(bits[position:position + length].uint)
            position += length

        self.value = tuple(values)
        self._phase = ChunkPhase.DONE


class StringField(Field):
    """Represent a contiguous chunk of bytes, its length can be a Dependency."""

    length = PropertyDescriptor('length', int)

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return b'' if self.default is None else self.default

    def _get_size(self):
        return len(self.value)

    def unpack(self, stream):
        self._phase = ChunkPhase.UNPACKING
        length = self.length
        if length < 0:
            logger.debug('negative length %d for field \'%s\'' % (length, self.name))
            raise UnpackException(chain=[])

        self.value = stream.read_exactly(length)
        self._phase = ChunkPhase.DONE


class ArrayField(Field):
    '''Unpack an array of n elements, each one a copy of the field passed as prototype.

    This class must behave like a list in python.
    '''

    def __init__(self, field, n=0, **kw):
        if not isinstance(n, int):
            raise Exception('n is \'%s\' must be of the right type' % n.__class__.__name__)

        self.field = field
        self.n = n

        kw.setdefault('default', [])
        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def value_from_default(self):
        return list(self.default)

    def _get_size(self):
        return sum(element.size for element in self.value)

    def instance_element(self):
        return self.field.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        self._phase = ChunkPhase.UNPACKING
        self.value = []

        for idx in range(self.n):
            element = self.instance_element()
            element.offset = stream.tell()
            try:
                element.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                self._phase = ChunkPhase.ERROR
                chain = e.chain if isinstance(e, ChunkUnpackException) else []
                chain.append(f'[{idx}]')
                raise ChunkUnpackException(chain=chain) from e

            self.value.append(element)

        self._phase = ChunkPhase.DONE
