import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


class ChunkPhase(Enum):
    '''Enum to state the actual phase of a chunk'''
    INIT      = 0
    UNPACKING = auto()
    DONE      = auto()
    ERROR     = auto()


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    taken from the value of the field named 'length' at unpacking time.

    The expression is resolved like a relative module path: the leading '.'
    means a field at the same level, each further component descends into
    a sub-chunk.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f'only relative dependencies are supported, got \'{expression}\'')

        self.expression = expression

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, instance):
        field = instance.father
        if field is None:
            raise AttributeError(f'cannot resolve \'{self.expression}\' for a field without father')

        for component_name in self.expression.split('.')[1:]:
            field = getattr(field, component_name)

        logger.debug(' resolved \'%s\' as field %s' % (self.expression, field.__class__.__name__))

        return field

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        return self.resolve_field(instance).value


class DeltaDependency(Dependency):
    '''Like Dependency but shifted by a constant, for lengths that
    also count some header bytes.'''

    def __init__(self, delta, expression):
        super().__init__(expression)
        self._delta = delta

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression}{self._delta:+d})>'

    def resolve(self, instance):
        value = super().resolve(instance)

        return value + self._delta


class PropertyDescriptor(object):
    """Attribute of a field that can be either a plain value or a Dependency
    resolved each time it's accessed."""

    def __init__(self, name: str, _type: type):
        self.name = name
        self.type = _type

    def __get__(self, instance, owner):
        if instance is None:
            return self

        data = instance.__dict__
        if self.name not in data:
            raise AttributeError(f"no '{self.name}' here!")

        value = data[self.name]

        if isinstance(value, Dependency):
            return value.resolve(instance)

        return value

    def __set__(self, instance, value):
        if not isinstance(value, (self.type, Dependency)):
            raise ValueError(f"A property must be of type {self.type} or a Dependency")

        instance.__dict__[self.name] = value
