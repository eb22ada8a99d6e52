"""Actions referenced by clparams.yaml."""
from clparams import Parameters


def greet(parameters: Parameters) -> None:
    """Print a greeting for every name given."""
    names = parameters.slot_for("name").values or ["world"]
    shout = parameters.slot_for("shout").present
    for name in names:
        message = f"Hello, {name}!"
        print(message.upper() if shout else message)


class Echo:
    description = "Echo the positional arguments"

    def run(self, parameters: Parameters) -> None:
        print(" ".join(parameters.positionals))


echo = Echo()
