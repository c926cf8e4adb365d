class ClassificationError(Exception):
    """Base exception for the classification engine"""
    pass

class ClassifierRegistrationError(ClassificationError):
    """Raised when an exercise identifier or classifier instance is bound twice"""
    pass

class UnknownClassifierPatternError(ClassificationError):
    """Raised when no classifier implements a configuration's pattern tag"""
    pass
