import torch
import numpy as np

from ..macro import C_DTYPE
from .gate_wrapper import gate_wrapper


def qft_matrix(n_wires):
    """Compute unitary matrix for QFT.

    Entry ``(m, n)`` is ``omega ** (m * n) / sqrt(N)`` with
    ``omega = exp(2 pi i / N)``, so the row index is the frequency and the
    column index the integer value held by the wires (first wire is the
    most significant bit).

    Args:
        n_wires: the number of qubits
    """
    dimension = 2**n_wires
    index = np.arange(dimension)
    # reduce the exponent first, large m * n lose precision in float
    exponent = np.outer(index, index) % dimension
    mat = np.exp(2j * np.pi * exponent / dimension) / np.sqrt(dimension)
    return torch.tensor(mat, dtype=C_DTYPE)


_qft_mat_dict = {
    "qft": qft_matrix,
}


def qft(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    name = "qft"
    if n_wires == None:
        wires = [wires] if isinstance(wires, int) else wires
        n_wires = len(wires)

    mat = _qft_mat_dict[name]
    gate_wrapper(
        name=name,
        mat=mat,
        method=comp_method,
        q_device=q_device,
        wires=wires,
        params=params,
        n_wires=n_wires,
        inverse=inverse,
    )


def iqft(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Inverse QFT, the conjugate transpose of ``qft`` on the same wires."""
    qft(
        q_device,
        wires,
        params=params,
        n_wires=n_wires,
        inverse=not inverse,
        comp_method=comp_method,
    )
