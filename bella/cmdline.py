"""
This is an interpreter for the Bella programming language.

{0}

For example:

    bella program.bella

will run program.bella if possible, or else try to explain why not.

    bella -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="bella",
	description="Interpreter for the Bella programming language.",
)
parser.add_argument("program", help="path to a Bella program, such as examples/gcd.bella")
parser.add_argument('-c', "--check", action="store_true", help="Parse the program but do not actually execute it.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is going on, on the standard error stream.")

def run(args):
	from .diagnostics import Report
	from .front_end import parse_file
	from .context import Context
	from .errors import BellaError
	from .executive import run as run_program
	report = Report(verbose=args.verbose)
	program = parse_file(Path.cwd() / args.program, report)
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	ctx = Context(echo=print)
	report.info("Running", args.program)
	try: run_program(program, ctx)
	except BellaError as ex:
		report.runtime_error(ex, ctx.pc)
	except RecursionError:
		report.too_deep(ctx.pc)
	if report.sick():
		report.complain_to_console()
		return 1
	report.info("Printed %d line(s)." % len(ctx.output))
	return 0

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		return 0
