import metasequoia_classfile as ms_classfile

if __name__ == "__main__":
    # render field access flags
    print(ms_classfile.FlagSet(0x0019, ms_classfile.FIELD_ACCESS_FLAGS).canonical_name())

    # build method access flags
    flag_set = ms_classfile.MutableFlagSet(0, ms_classfile.METHOD_ACCESS_FLAGS)
    flag_set.add(ms_classfile.METHOD_ACCESS_FLAGS["synchronized"])
    flag_set.add(ms_classfile.METHOD_ACCESS_FLAGS["public"])
    print(flag_set.canonical_name(), hex(flag_set.value))

    # parse modifiers
    print(ms_classfile.FlagSet.parse("final static private", ms_classfile.FIELD_ACCESS_FLAGS))
