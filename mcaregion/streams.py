import io
import logging

from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: region files are small enough (at most
    1024 chunks of 1MiB) that we always keep the whole content in memory.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to build a stream from' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%s, size=%d)>' % (self.__class__.__name__, self._type.__name__, self.size)

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        with open(self.obj, 'rb') as f:
            self.obj = io.BytesIO(f.read())

    def init_PosixPath(self):
        self.obj = str(self.obj)
        self.init_str()

    init_WindowsPath = init_PosixPath

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    @property
    def size(self):
        with self.obj.getbuffer() as view:
            return len(view)

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def read_exactly(self, n):
        '''Read n bytes or fail: a short read means the data is truncated.'''
        data = self.obj.read(n)

        if len(data) != n:
            logger.debug('short read at %d: wanted %d bytes, got %d' % (self.tell(), n, len(data)))
            raise UnpackException(chain=[])

        return data

