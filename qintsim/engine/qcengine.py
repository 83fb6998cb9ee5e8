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

import math
import torch

from collections import OrderedDict
from typing import Optional, Union

from torchpack.utils.logging import logger

from qintsim.device import QuantumDevice
from qintsim.measurement import probabilities, read, register_amplitudes
from qintsim.util.utils import mask_to_qubits, qubits_to_wires
from .qint import QInt

__all__ = ["QCEngine", "QubitAllocationError", "qc"]


class QubitAllocationError(RuntimeError):
    """Raised when a register asks for more qubits than are left."""


class QCEngine(object):
    """Register level front end to a QuantumDevice.

    Qubit ``i`` of the engine holds the value ``2**i``, and every operation
    selects its qubits with an integer bitmask. ``reset`` creates the
    register, ``new_qint`` carves named integers out of it.

    Args:
        device: which classical computing device to use, 'cpu' or 'cuda'
        comp_method: 'bmm' or 'einsum' matrix vector multiplication
        record_op: whether the underlying device records its op history
        seed: seed of the generator used by ``read``
    """

    def __init__(
        self,
        device: Union[torch.device, str] = "cpu",
        comp_method: str = "bmm",
        record_op: bool = False,
        seed: Optional[int] = None,
    ):
        self.device = device
        self.comp_method = comp_method
        self.record_op = record_op
        self.generator = torch.Generator()
        if seed is not None:
            self.generator.manual_seed(seed)

        self.qdev = None
        self.qints = OrderedDict()
        self._next_qubit = 0

    @property
    def num_qubits(self) -> int:
        return 0 if self.qdev is None else self.qdev.n_wires

    @property
    def all_mask(self) -> int:
        return 2**self.num_qubits - 1

    @property
    def op_history(self):
        self._check_ready()
        return self.qdev.op_history

    def _check_ready(self):
        if self.qdev is None:
            logger.exception(f"The engine has no register yet.")
            raise RuntimeError("call reset(n_qubits) before using the engine")

    def _resolve_mask(self, mask: Optional[int]) -> int:
        self._check_ready()
        return self.all_mask if mask is None else mask

    def mask_to_wires(self, mask: int):
        """Device wires of the qubits in ``mask``, most significant first."""
        return qubits_to_wires(mask_to_qubits(mask, self.num_qubits), self.num_qubits)

    def reset(self, n_qubits: int):
        """Start over with ``n_qubits`` qubits in |0>, dropping all qints."""
        if n_qubits < 1:
            logger.exception(f"Cannot reset the engine to {n_qubits} qubits.")
            raise ValueError(f"n_qubits should be positive, got {n_qubits}")

        self.qdev = QuantumDevice(
            n_wires=n_qubits, device=self.device, record_op=self.record_op
        )
        self.qints = OrderedDict()
        self._next_qubit = 0
        logger.debug(f"Engine reset to {n_qubits} qubits.")

    def new_qint(self, n_qubits: int, name: str) -> QInt:
        """Allocate the next ``n_qubits`` free qubits as a named integer."""
        self._check_ready()
        if n_qubits < 1:
            logger.exception(f"Cannot allocate a qint of {n_qubits} qubits.")
            raise ValueError(f"a qint needs at least one qubit, got {n_qubits}")
        if name in self.qints:
            logger.exception(f"A qint called '{name}' already exists.")
            raise ValueError(f"duplicate qint name '{name}'")
        if self._next_qubit + n_qubits > self.num_qubits:
            logger.exception(
                f"Cannot allocate {n_qubits} qubits for '{name}', only "
                f"{self.num_qubits - self._next_qubit} left."
            )
            raise QubitAllocationError(
                f"'{name}' needs {n_qubits} qubits but only "
                f"{self.num_qubits - self._next_qubit} are free"
            )

        qint = QInt(self, n_qubits, name, start=self._next_qubit)
        self._next_qubit += n_qubits
        self.qints[name] = qint
        logger.debug(f"Allocated {qint}.")
        return qint

    def read(self, mask: Optional[int] = None) -> int:
        """Measure the masked qubits, collapsing the register."""
        mask = self._resolve_mask(mask)
        return read(self.qdev, mask, generator=self.generator)[0]

    def write(self, value: int, mask: Optional[int] = None):
        """Set the masked qubits to ``value``.

        The qubits are read first and the ones that disagree with ``value``
        are flipped, so a superposition collapses before it is overwritten.
        """
        if value != int(value):
            logger.exception(f"Cannot write the non-integer value {value}.")
            raise ValueError(f"value {value} is not an integer")
        value = int(value)
        mask = self._resolve_mask(mask)
        qubits = mask_to_qubits(mask, self.num_qubits)
        if value < 0 or value >= 2 ** len(qubits):
            logger.exception(f"Value {value} does not fit into mask {mask}.")
            raise ValueError(f"value {value} does not fit into {len(qubits)} qubits")

        diff = self.read(mask) ^ value
        flip = [q for j, q in enumerate(qubits) if (diff >> j) & 1]
        for wire in qubits_to_wires(flip, self.num_qubits):
            self.qdev.x(wires=wire, comp_method=self.comp_method)

    def peek_probability(self, value: int, mask: Optional[int] = None) -> float:
        """Probability of reading ``value`` from the masked qubits, without
        disturbing the state."""
        mask = self._resolve_mask(mask)
        marginal = probabilities(self.qdev, mask)[0]
        if value < 0 or value >= marginal.shape[0]:
            logger.exception(f"Value {value} does not fit into mask {mask}.")
            raise ValueError(f"value {value} does not fit into mask {mask}")
        return marginal[value].item()

    def hadamard(self, mask: Optional[int] = None):
        for wire in self.mask_to_wires(self._resolve_mask(mask)):
            self.qdev.h(wires=wire, comp_method=self.comp_method)

    def not_(self, mask: Optional[int] = None):
        for wire in self.mask_to_wires(self._resolve_mask(mask)):
            self.qdev.x(wires=wire, comp_method=self.comp_method)

    def phase(self, degrees: float, mask: Optional[int] = None):
        """Rotate the phase of the basis states where every masked qubit is 1."""
        mask = self._resolve_mask(mask)
        if mask == 0:
            logger.exception(f"A phase needs at least one condition qubit.")
            raise ValueError("phase mask selects no qubits")
        self.qdev.multiphase(
            wires=self.mask_to_wires(mask),
            params=math.radians(degrees),
            comp_method=self.comp_method,
        )

    def amplitudes(self, mask: Optional[int] = None) -> torch.Tensor:
        """Amplitudes of the masked qubits, indexed by value."""
        return register_amplitudes(self.qdev, self._resolve_mask(mask))

    def describe(self, mask: Optional[int] = None, threshold: float = 1e-6) -> str:
        """Table of the non-negligible values with probability and phase."""
        amplitudes = self.amplitudes(mask)
        lines = [f"{'value':>6} {'prob':>8} {'phase':>8}"]
        for value, amp in enumerate(amplitudes.tolist()):
            prob = abs(amp) ** 2
            if prob < threshold:
                continue
            phase = math.degrees(math.atan2(amp.imag, amp.real))
            lines.append(f"{value:>6} {prob:>8.4f} {phase:>8.1f}")
        return "\n".join(lines)

    def __repr__(self):
        return (
            f"QCEngine(num_qubits={self.num_qubits}, "
            f"qints={list(self.qints.keys())}, device={self.device})"
        )


# default engine, shared by ``qint.new`` when no engine is given
qc = QCEngine()
