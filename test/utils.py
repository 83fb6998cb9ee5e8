import numpy as np
import torch

from qintsim import QuantumDevice


def check_all_close(a, b, rtol=1e-5, atol=1e-4):
    """Check that all elements of a and b are close."""
    if isinstance(a, torch.Tensor):
        a = a.detach().cpu().numpy()
    if isinstance(b, torch.Tensor):
        b = b.detach().cpu().numpy()
    assert a.shape == b.shape
    assert np.allclose(a, b, rtol=rtol, atol=atol)


def random_state(n_wires, bsz=1, seed=0):
    """A normalized random complex state, [bsz, 2**n_wires]."""
    rng = np.random.default_rng(seed)
    state = rng.normal(size=(bsz, 2**n_wires)) + 1j * rng.normal(size=(bsz, 2**n_wires))
    state /= np.linalg.norm(state, axis=-1, keepdims=True)
    return state


def device_with_state(state):
    n_wires = int(np.log2(state.shape[-1]))
    qdev = QuantumDevice(n_wires=n_wires, bsz=state.shape[0])
    qdev.set_states(torch.tensor(state, dtype=torch.complex64))
    return qdev
