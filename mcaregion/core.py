"""
Core module for the abstraction of a file format

"""
import logging
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import (
    ChunkUnpackException,
    UnpackException,
)
from .properties import ChunkPhase


logger = logging.getLogger(__name__)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its main attributes
    are offset and size that identify a Chunk.

    A Chunk can contain sub-chunks; the fields are unpacked in the order
    they are declared.
    """

    def __init__(self, data=None, **kwargs):
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if data is not None:
            stream = data if isinstance(data, Stream) else Stream(data)
            logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream))
            self.unpack(stream)

    def init(self):
        pass

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    @property
    def value(self) -> Dict[str, object]:
        return {name: field.value for name, field in self.get_fields()}

    def _get_size(self):
        '''the size MUST be derived from the subchunks'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def unpack(self, stream):
        '''Take the binary data at the current position of the stream and
        fill the fields of this chunk, one after the other.

        A failure in a sub-field is re-raised as ChunkUnpackException with
        the chain of field names leading to it (innermost first).'''
        self._phase = ChunkPhase.UNPACKING
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            field.offset = stream.tell()

            try:
                field.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                self._phase = ChunkPhase.ERROR
                chain = e.chain if isinstance(e, ChunkUnpackException) else []
                chain.append(field_name)
                raise ChunkUnpackException(
                    chain=chain,
                    message='unable to unpack %s.%s' % (self.__class__.__name__, '.'.join(reversed(chain))),
                ) from e

        self._phase = ChunkPhase.DONE
