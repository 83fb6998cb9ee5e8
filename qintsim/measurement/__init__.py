from .measurements import *
