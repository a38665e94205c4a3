from .errors import (AutomatonError, MalformedTable, DuplicateState, UnknownStateReference,
                     EmptyModel, EmptyStateSet, EmptyAlphabet, IoFailure)
from .model import Machine, MEALY, MOORE, mealy, moore
from .reachability import reachable_states, remove_unreachable
from .partition import Partition, initial_partition, refine_once, refine
from .builder import Renaming, build_minimized
from .minimize import minimize
