import torch

from ..macro import C_DTYPE
from .gate_wrapper import gate_wrapper

_x_mat_dict = {
    "paulix": torch.tensor([[0, 1], [1, 0]], dtype=C_DTYPE),
}


def paulix(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Perform the Pauli X (NOT) gate.

    Args:
        q_device (qintsim.QuantumDevice): The QuantumDevice.
        wires (Union[List[int], int]): Which qubit(s) to apply the gate.
        params (torch.Tensor, optional): Parameters (if any) of the gate.
            Default to None.
        n_wires (int, optional): Number of qubits the gate is applied to.
            Default to None.
        inverse (bool, optional): Whether inverse the gate. Default to False.
        comp_method (bool, optional): Use 'bmm' or 'einsum' method to perform
        matrix vector multiplication. Default to 'bmm'.

    Returns:
        None.

    """
    name = "paulix"
    mat = _x_mat_dict[name]
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


x = paulix
