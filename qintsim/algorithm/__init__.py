from .qft_signals import *
