""" Contains the exceptions raised by caseless
Classes:
    UnsupportedKeyKind

"""


class UnsupportedKeyKind(TypeError):
    """Exception raised for keys which are neither strings nor numbers.

    Attributes:
        key -- the rejected key
    """

    MSG_TEMPLATE = "Keys of type {} are not supported, only str, int and float keys are."

    def __init__(self, key):
        self.key = key
        super().__init__(self.MSG_TEMPLATE.format(type(key).__name__))
