from .steam import *
