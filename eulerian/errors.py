# errors.py
'''
Exceptions raised while reading an instance or building a trail.

An unsolvable instance is not an error: the solver reports it through its
result and the CLI prints -1.
'''


class EulerianError(Exception):
    '''Base class for every failure raised by this package.'''


class InputFormatError(EulerianError):
    '''The instance file is missing or malformed.'''


class ResourceExhaustedError(EulerianError):
    '''Memory ran out while building the graph or the trail.'''


class InternalConsistencyError(EulerianError):
    '''A validated instance ended up in a state the algorithm never produces.'''


class EdgeAlreadyUsedError(InternalConsistencyError):
    '''An edge was consumed twice.'''


class WalkStalledError(InternalConsistencyError):
    '''A sub-circuit walk ran out of unused edges before reaching its end node.'''

    def __init__(self, start: int, end: int, reached: int):
        super().__init__(
            f"walk from node {start} towards node {end} got stuck at node {reached}"
        )
        self.start, self.end, self.reached = start, end, reached


class IncompleteTrailError(InternalConsistencyError):
    '''All candidate nodes were processed but the trail still misses edges.'''

    def __init__(self, length: int, required: int):
        super().__init__(
            f"candidate list exhausted with {length} of {required} node visits"
        )
        self.length, self.required = length, required
