from metasequoia_classfile.flags import *

__version__ = "0.1.0"
