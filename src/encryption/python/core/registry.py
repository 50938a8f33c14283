import logging

# setup logging
logger = logging.getLogger("PythonCore")

# dictionary to store implementations
ENCRYPTION_IMPLEMENTATIONS = {}

def register_implementation(name):
    # register an encryption implementation
    def decorator(impl_class):
        ENCRYPTION_IMPLEMENTATIONS[name] = impl_class
        return impl_class
    return decorator

def get_implementation(name):
    # get an implementation by name
    return ENCRYPTION_IMPLEMENTATIONS.get(name)

def list_implementations():
    # list all registered implementations
    return list(ENCRYPTION_IMPLEMENTATIONS.keys())

def register_all_implementations():
    # import here to avoid circular imports
    try:
        from src.encryption.python.kasumi import register_kasumi_implementations

        kasumi_implementations = register_kasumi_implementations()

        for name, impl in kasumi_implementations.items():
            ENCRYPTION_IMPLEMENTATIONS[name] = impl

        logger.info(f"Registered KASUMI implementations: {', '.join(kasumi_implementations.keys())}")
    except ImportError as e:
        logger.warning(f"Could not import KASUMI implementations: {str(e)}")

    # log all registered implementations
    logger.info(f"Total registered implementations: {len(ENCRYPTION_IMPLEMENTATIONS)}")
    return ENCRYPTION_IMPLEMENTATIONS
