from metasequoia_classfile.flags.access_flag import *
from metasequoia_classfile.flags.definition import *
from metasequoia_classfile.flags.domains import *
from metasequoia_classfile.flags.errors import *
from metasequoia_classfile.flags.flag_set import *
