"""
MIT License

Copyright (c) 2020-present TorchQuantum Authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from typing import Optional, Union, TYPE_CHECKING

from torchpack.utils.logging import logger

from qintsim.measurement import probabilities
from qintsim.util.utils import qubits_to_wires

if TYPE_CHECKING:
    from .qcengine import QCEngine
else:
    QCEngine = None

__all__ = ["QInt", "new"]


class QInt(object):
    """A named quantum integer living on a contiguous run of engine qubits.

    Bit ``j`` of the integer is engine qubit ``start + j``. Condition masks
    passed to the methods are relative to the integer, so ``cond=1`` always
    means its lowest bit.
    """

    def __init__(self, qc: QCEngine, n_qubits: int, name: str, start: int = 0):
        self.qc = qc
        self.n_qubits = n_qubits
        self.name = name
        self.start = start

    @property
    def mask(self) -> int:
        return (2**self.n_qubits - 1) << self.start

    @property
    def wires(self):
        """Device wires of the integer, most significant bit first."""
        return qubits_to_wires(
            list(range(self.start, self.start + self.n_qubits)), self.qc.num_qubits
        )

    def _check_alive(self):
        if self.qc.qints.get(self.name) is not self:
            logger.exception(f"'{self.name}' was freed by an engine reset.")
            raise RuntimeError(f"qint '{self.name}' no longer belongs to its engine")

    def _cond_mask(self, cond: Optional[int]) -> int:
        self._check_alive()
        if cond is None:
            return self.mask
        if cond <= 0 or cond >= 2**self.n_qubits:
            logger.exception(
                f"Condition {cond} is not a non-empty mask of the "
                f"{self.n_qubits} qubits of '{self.name}'."
            )
            raise ValueError(f"invalid condition mask {cond} for '{self.name}'")
        return cond << self.start

    def write(self, value: int):
        self.qc.write(value, self._cond_mask(None))

    def read(self) -> int:
        return self.qc.read(self._cond_mask(None))

    def peek_probability(self, value: int) -> float:
        return self.qc.peek_probability(value, self._cond_mask(None))

    def probabilities(self):
        return probabilities(self.qc.qdev, self._cond_mask(None))[0]

    def amplitudes(self):
        return self.qc.amplitudes(self._cond_mask(None))

    def hadamard(self, cond: Optional[int] = None):
        self.qc.hadamard(self._cond_mask(cond))

    def not_(self, cond: Optional[int] = None):
        self.qc.not_(self._cond_mask(cond))

    def phase(self, degrees: float, cond: Optional[int] = None):
        """Rotate by ``degrees`` the values whose ``cond`` bits are all 1."""
        self.qc.phase(degrees, self._cond_mask(cond))

    def _add(self, amount: Union[int, "QInt"], inverse: bool):
        self._check_alive()
        qdev = self.qc.qdev
        if isinstance(amount, QInt):
            if amount.qc is not self.qc:
                logger.exception(
                    f"'{amount.name}' and '{self.name}' live on different engines."
                )
                raise ValueError("cannot add qints from different engines")
            amount._check_alive()
            if amount.mask & self.mask:
                logger.exception(f"'{amount.name}' overlaps '{self.name}'.")
                raise ValueError(f"'{amount.name}' and '{self.name}' share qubits")
            qdev.addreg(
                wires=self.wires + amount.wires,
                params=amount.n_qubits,
                inverse=inverse,
                comp_method=self.qc.comp_method,
            )
        else:
            # params travel as float32, keep the constant small enough to be exact
            qdev.addconst(
                wires=self.wires,
                params=int(amount) % 2**self.n_qubits,
                inverse=inverse,
                comp_method=self.qc.comp_method,
            )

    def add(self, amount: Union[int, "QInt"]):
        """Add a constant or another qint, modulo ``2**n_qubits``."""
        self._add(amount, inverse=False)

    def subtract(self, amount: Union[int, "QInt"]):
        self._add(amount, inverse=True)

    def QFT(self):
        self._check_alive()
        self.qc.qdev.qft(wires=self.wires, comp_method=self.qc.comp_method)

    def invQFT(self):
        self._check_alive()
        self.qc.qdev.iqft(wires=self.wires, comp_method=self.qc.comp_method)

    def __repr__(self):
        return (
            f"QInt(name='{self.name}', n_qubits={self.n_qubits}, "
            f"qubits={self.start}..{self.start + self.n_qubits - 1})"
        )


def new(n_qubits: int, name: str, qc: Optional[QCEngine] = None) -> QInt:
    """Allocate a qint on ``qc``, or on the default engine when omitted."""
    if qc is None:
        from .qcengine import qc
    return qc.new_qint(n_qubits, name)
