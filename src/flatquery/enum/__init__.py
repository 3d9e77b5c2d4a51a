from .ordering import Ordering as Ordering
from .operator import Operator as Operator
from .join_mode import JoinMode as JoinMode
from .distance_unit import DistanceUnit as DistanceUnit
