#!/bin/python3
#
# 20261018
#
# Command line tool to generate a secure random password
#
import logging
import optparse
import os
import sys

import colorama
import pyperclip3
from pyperclip3.base import ClipboardException
from termcolor import colored

from generator_config import DEFAULT_BUILTIN_SELECTOR, DEFAULT_LENGTH, FLAG_DIGIT, FLAG_LOWER, FLAG_UPPER, \
    GeneratorConfigBuilder, parse_length
from generator_exceptions import GenerationError
from password_generator import generate

colorama.init()

#
# VARIABLES
#
VERSION = "[pg] secure password generator version: 2026.10.18"
ENVIRONMENT_VARIABLE_LENGTH = "PG_LENGTH"


def create_option_parser() -> optparse.OptionParser:
    parser = optparse.OptionParser(usage="%prog [options]")
    parser.add_option("-l", "--length", action="store", type="int", dest="length",
                      help="The length of the password to be generated (default=" + str(DEFAULT_LENGTH) +
                           "). It is also possible to create an environment variable: " +
                           ENVIRONMENT_VARIABLE_LENGTH + "=<length>")
    parser.add_option("-a", "--add", action="store", dest="add", default=DEFAULT_BUILTIN_SELECTOR,
                      help="Add lower-case (" + FLAG_LOWER + "), upper-case letters (" + FLAG_UPPER +
                           ") or digits (" + FLAG_DIGIT + ") to the list of mandatory sets (default=" +
                           DEFAULT_BUILTIN_SELECTOR + ")")
    parser.add_option("-m", "--must", action="append", dest="must", default=[],
                      help="Add a custom mandatory set to the list, can be used more than once to add " +
                           "multiple sets")
    parser.add_option("-d", "--optional", "--discretionary", action="store", dest="discretionary", default="",
                      help="Add some discretionary (optional) characters to choose from")
    parser.add_option("-c", "--clipboard", action="store_true", dest="clipboard", default=False,
                      help="Copy the generated password to the clipboard")
    parser.add_option("-v", "--verbose", action="store_true", dest="verbose", default=False,
                      help="Show debug messages on stderr")
    parser.add_option("-V", "--version", action="store_true", dest="version", default=False,
                      help="Show pg version info")
    return parser


def get_requested_length(options) -> int:
    if options.length is not None:
        return options.length
    # check if the length is set in environment variable
    environment_length = os.environ.get(ENVIRONMENT_VARIABLE_LENGTH)
    if environment_length is not None and environment_length != "":
        logging.debug("Using length from environment variable " + ENVIRONMENT_VARIABLE_LENGTH)
        return parse_length(environment_length)
    return DEFAULT_LENGTH


def build_config(options):
    builder = GeneratorConfigBuilder(get_requested_length(options))
    builder.add_builtin_sets(options.add)
    for custom_set in options.must:
        builder.add_mandatory_set(custom_set)
    builder.set_discretionary_set(options.discretionary)
    return builder.build()


def print_error(message: str):
    print(colored("Error: " + message, "red"), file=sys.stderr)


#
# main
#
def main(argv=None):
    parser = create_option_parser()
    (options, args) = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, format="%(levelname)s: %(message)s",
                        level=logging.DEBUG if options.verbose else logging.WARNING)

    if options.version:
        print(VERSION)
        sys.exit(0)

    if len(args) > 0:
        parser.error("Unexpected arguments: " + " ".join(args))

    try:
        config = build_config(options)
        password = generate(config)
    except GenerationError as e:
        logging.debug("Generation failed: " + type(e).__name__)
        print_error(str(e))
        sys.exit(1)

    if options.clipboard:
        try:
            pyperclip3.copy(password)
        except ClipboardException as e:
            print_error("Could not copy password to clipboard: " + str(e))
            sys.exit(1)
        logging.debug("Password copied to clipboard.")

    print(password)


if __name__ == '__main__':
    main()
