"""
# Rewrite a playlist with every tag line in canonical form.

# Reads playlist text from standard input and writes it to standard output.
# Lines that are not tags are passed through unchanged. Invalid tag lines are
# reported to standard error with their line number.
"""
import sys
import logging
import argparse

from .. import project
from .. import library
from ..core import InvalidInput

logger = logging.getLogger(__name__)

def arguments():
	p = argparse.ArgumentParser(prog='hls.bin.canonical', description=project.abstract)
	p.add_argument('-i', '--ignore-unknown', action='store_true',
		help="pass unrecognized #EXT tags through instead of failing")
	p.add_argument('-v', '--verbose', action='store_true',
		help="log processing details to standard error")
	return p

def rewrite(lines, policy):
	"""
	# Generate the canonical form of each line in &lines.
	"""
	for number, line in enumerate(lines, 1):
		line = line.rstrip('\r\n')
		if not line.startswith('#EXT'):
			yield line
			continue

		try:
			tag = library.parse(line, policy)
		except InvalidInput as err:
			err.line = number
			raise

		if tag is None:
			yield line
		else:
			yield library.serialize(tag)

def main(src, dst, args, *, stderr=sys.stderr) -> int:
	options = arguments().parse_args(args)
	policy = library.Policy(unknown='ignore' if options.ignore_unknown else 'error')

	count = 0
	try:
		for line in rewrite(src, policy):
			dst.write(line + '\n')
			count += 1
	except InvalidInput as err:
		stderr.write("[!# ERROR: %s]\n" %(err,))
		return 1

	logger.info("rewrote %d lines", count)
	return 0

if __name__ == '__main__':
	options = arguments().parse_args()
	logging.basicConfig(
		level=logging.DEBUG if options.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	sys.exit(main(sys.stdin, sys.stdout, sys.argv[1:]))
