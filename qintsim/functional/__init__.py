from .gate_wrapper import gate_wrapper, apply_unitary_einsum, apply_unitary_bmm
from .hadamard import hadamard, h
from .paulix import paulix, x
from .phase_shift import (
    phaseshift,
    multiphase,
    p,
    phaseshift_matrix,
    multiphase_matrix,
)
from .qft import qft, iqft, qft_matrix
from .arithmetic import (
    addconst,
    addreg,
    addconst_matrix,
    addreg_matrix,
)

func_name_dict = {
    "hadamard": hadamard,
    "h": h,
    "paulix": paulix,
    "x": x,
    "phaseshift": phaseshift,
    "p": p,
    "multiphase": multiphase,
    "qft": qft,
    "iqft": iqft,
    "addconst": addconst,
    "addreg": addreg,
}

__all__ = [
    "func_name_dict",
    "gate_wrapper",
    "apply_unitary_einsum",
    "apply_unitary_bmm",
    "hadamard",
    "h",
    "paulix",
    "x",
    "phaseshift",
    "p",
    "multiphase",
    "phaseshift_matrix",
    "multiphase_matrix",
    "qft",
    "iqft",
    "qft_matrix",
    "addconst",
    "addreg",
    "addconst_matrix",
    "addreg_matrix",
]
