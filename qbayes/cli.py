"""
QBayes command line.

Examples:
    qbayes entropy "1, 1, 2, 2"
    qbayes bayes-factor "0.1, 0.2, 0.3, 0.4"
    qbayes infer --priors '{"A": 0.5, "B": 0.5}' --likelihoods '[{"A": 0.8, "B": 0.2}]'
    qbayes collapse "0.2, 0.5, 0.3"
    qbayes noise perlin --points 20 --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from qbayes.bayes.decision import weigh_decision
from qbayes.bayes.scoring import bayes_factor, bayesian_update
from qbayes.core.config import get_config
from qbayes.core.errors import ConfigError, DivisionByZeroError, InvalidInputError
from qbayes.logging_utils import qerr, qstep, set_verbose
from qbayes.quantum.collapse import WaveCollapseSimulator
from qbayes.quantum.entropy import categorical_entropy, magnitude_entropy
from qbayes.quantum.noise import NOISE_KINDS, generate_noise
from qbayes.quantum.projection import project_sequence
from qbayes import report

EXIT_INPUT_ERROR = 1
EXIT_NUMERIC_ERROR = 2


def _cmd_noise(args: argparse.Namespace) -> str:
    values = generate_noise(
        args.kind,
        amplitude=args.amplitude,
        frequency=args.frequency,
        phase=args.phase,
        points=args.points,
        random_state=args.seed,
    )
    return report.format_sequence(values)


def _cmd_entropy(args: argparse.Namespace) -> str:
    data = report.parse_numeric_list(args.data)
    if args.magnitude:
        return f"Magnitude Entropy: {report.format_value(magnitude_entropy(data))}"
    return f"Entropy: {report.format_value(categorical_entropy(data))}"


def _cmd_bayes_factor(args: argparse.Namespace) -> str:
    data = report.parse_numeric_list(args.data)
    return report.format_bayes_factor(bayes_factor(data))


def _cmd_project(args: argparse.Namespace) -> str:
    data = report.parse_numeric_list(args.data)
    return report.format_sequence_projection(project_sequence(data, coherence=args.coherence))


def _cmd_infer(args: argparse.Namespace) -> str:
    priors = report.parse_json_mapping(args.priors)
    rounds = report.parse_json_rounds(args.likelihoods)
    posteriors = bayesian_update(priors, rounds)
    table = report.posterior_frame(priors, posteriors)

    # the inference screen also collapses the prior values themselves
    collapsed = WaveCollapseSimulator().collapse(list(priors.values()), previous_action=0)
    return report.format_posteriors(table) + "\n" + report.format_collapse(collapsed)


def _cmd_decide(args: argparse.Namespace) -> str:
    decision = weigh_decision(args.entropy, args.coherence, args.prn_influence)
    return report.format_decision(decision)


def _cmd_collapse(args: argparse.Namespace) -> str:
    states = report.parse_numeric_list(args.states)
    sim = WaveCollapseSimulator(prn_influence=args.prn_influence)
    return report.format_collapse(sim.collapse(states, previous_action=args.previous_action))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qbayes",
        description="Entropy, Bayes scoring and wave-collapse sandbox.",
    )
    parser.add_argument("--html", action="store_true", help="Emit escaped HTML (<br> separated) instead of text.")
    parser.add_argument("--verbose", action="store_true", help="Print step messages.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("noise", help="Generate a synthetic noise sequence.")
    p.add_argument("kind", choices=NOISE_KINDS)
    p.add_argument("--amplitude", type=float, default=1.0)
    p.add_argument("--frequency", type=float, default=1.0)
    p.add_argument("--phase", type=float, default=0.0)
    p.add_argument("--points", type=int, default=get_config().noise_points)
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")
    p.set_defaults(func=_cmd_noise)

    p = sub.add_parser("entropy", help="Shannon entropy of a comma-separated list.")
    p.add_argument("data")
    p.add_argument("--magnitude", action="store_true", help="Treat values as magnitudes, not draws.")
    p.set_defaults(func=_cmd_entropy)

    p = sub.add_parser("bayes-factor", help="Bayes factor + interpretation of a list.")
    p.add_argument("data")
    p.set_defaults(func=_cmd_bayes_factor)

    p = sub.add_parser("project", help="Magnitude entropy and cosine projection of a list.")
    p.add_argument("data")
    p.add_argument("--coherence", type=float, default=0.5)
    p.set_defaults(func=_cmd_project)

    p = sub.add_parser("infer", help="Posterior update from JSON priors and likelihood rounds.")
    p.add_argument("--priors", required=True, help='JSON object, e.g. \'{"A": 0.5, "B": 0.5}\'')
    p.add_argument("--likelihoods", required=True, help="JSON list of objects (one per round).")
    p.set_defaults(func=_cmd_infer)

    p = sub.add_parser("decide", help="Weighted decision from three signals.")
    p.add_argument("entropy", type=float)
    p.add_argument("coherence", type=float)
    p.add_argument("prn_influence", type=float)
    p.set_defaults(func=_cmd_decide)

    p = sub.add_parser("collapse", help="Wave-collapse a comma-separated state list.")
    p.add_argument("states")
    p.add_argument("--previous-action", type=int, default=0, choices=(0, 1))
    p.add_argument("--prn-influence", type=float, default=None)
    p.set_defaults(func=_cmd_collapse)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    qstep(f"Running {args.command}")

    try:
        text = args.func(args)
    except (InvalidInputError, ConfigError) as e:
        qerr(f"Invalid input: {e}")
        return EXIT_INPUT_ERROR
    except DivisionByZeroError as e:
        qerr(f"Numerical error: {e}")
        return EXIT_NUMERIC_ERROR

    print(report.to_html(text) if args.html else text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
