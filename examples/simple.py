import sys

from clparams import UNLIMITED, Parameters
from clparams.utils import setup_logging

setup_logging(log_filename=None)


def build(parameters: Parameters) -> None:
    targets = parameters.slot_for("target").values or ["all"]
    jobs = parameters.slot_for("jobs").values or ["1"]
    for target in targets:
        print(f"Building {target} with {jobs[0]} job(s)")
    if parameters.positionals:
        print(f"Ignoring extra arguments: {' '.join(parameters.positionals)}")


def clean(parameters: Parameters) -> None:
    if parameters.slot_for("dry-run").present:
        print("Would remove build/")
    else:
        print("Removing build/")


parameters = Parameters("Tiny build tool.\nPass an action, then any flags.")
parameters.add_action("build", "Build one or more targets", build)
parameters.add_action("clean", "Remove build output", clean)
parameters.add_parameter(
    "target", "t", max_arity=UNLIMITED, description="Targets to build"
)
parameters.add_parameter("jobs", "j", description="Number of parallel jobs")
parameters.add_parameter(
    "dry-run", "n", max_arity=0, description="Only print what would happen"
)

if __name__ == "__main__":
    parameters.parse(sys.argv[1:])
    if not parameters.run_action():
        parameters.render_help()
