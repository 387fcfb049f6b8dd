"""bizdash: small-business dashboard for the command line."""

__version__ = "0.1.0"


# The CLI pulls in every command module, so it is only loaded on demand
def __getattr__(name):
    if name == "main":
        from bizdash.cli.main import main
        return main
    raise AttributeError(f"module 'bizdash' has no attribute '{name}'")
