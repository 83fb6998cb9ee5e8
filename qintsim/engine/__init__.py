from .qint import QInt
from .qcengine import QCEngine, QubitAllocationError, qc
from . import qint
