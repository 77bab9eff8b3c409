class RegionException(Exception):
    '''Base class to extend in order to throw exception in mcaregion.

    It takes a single argument that represents the chain of the layer that
    caused the exception.
    '''

    def __init__(self, chain, message=''):
        self.chain = chain
        super().__init__(message)


class UnpackException(RegionException):
    pass


class ChunkUnpackException(RegionException):
    pass


class TruncatedHeader(RegionException):
    '''The file is too short to contain the location and timestamp tables.

    This is fatal: without a header there is nothing to locate.'''

    def __init__(self, size, chain=None):
        self.size = size
        super().__init__(chain or [], f'region header truncated: file is only {size} bytes')


class ChunkException(RegionException):
    '''A problem confined to a single chunk: the caller reports it
    and goes on with the next one.'''

    def __init__(self, message, location=None, chain=None):
        self.location = location
        super().__init__(chain or [], message)


class OutOfBounds(ChunkException):
    pass


class DeclaredLengthOverflow(ChunkException):

    def __init__(self, length, location=None, chain=None):
        self.length = length
        super().__init__(f'declared length {length} does not fit the reserved sectors', location=location, chain=chain)


class UnsupportedCompression(ChunkException):

    def __init__(self, tag, location=None):
        self.tag = tag
        super().__init__(f'unsupported compression type {tag}', location=location)


class InflateError(ChunkException):
    '''The stage is one of "init", "inflate" or "end".'''

    def __init__(self, stage, location=None):
        self.stage = stage
        super().__init__(f'decompression failed at stage \'{stage}\'', location=location)
