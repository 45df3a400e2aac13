import logging

# our public exports, relatively minimal
from intset.exc import IntSetError as IntSetError, InvalidArgumentError as InvalidArgumentError
from intset.intset import (
    DEFAULT_CAPACITY as DEFAULT_CAPACITY,
    IntSet as IntSet,
    SetStatistics as SetStatistics,
)
from intset.utils import TRACE

logging.addLevelName(TRACE, "TRACE")
