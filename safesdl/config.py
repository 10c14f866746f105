"""
safesdl - config.py
Configuration file and command-line options parser

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging
import configparser
from collections import deque


# configuration file section
SECTION = u'safesdl'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# bool strings
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# recognised options
ARGUMENTS = {
    u'config': {u'type': u'string', u'default': u''},
    u'title': {u'type': u'string', u'default': u'safesdl'},
    u'width': {u'type': u'int', u'default': 640},
    u'height': {u'type': u'int', u'default': 480},
    u'fullscreen': {u'type': u'bool', u'default': False},
    u'resizable': {u'type': u'bool', u'default': False},
    u'borderless': {u'type': u'bool', u'default': False},
    u'driver': {u'type': u'string', u'default': u''},
    u'dll-path': {u'type': u'string', u'list': u'*', u'default': []},
    u'wait': {u'type': u'int', u'default': 0},
    u'logfile': {u'type': u'string', u'default': u''},
    u'debug': {u'type': u'bool', u'default': False},
}


##############################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # include messages from warnings module in the logs
        logging.captureWarnings(True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Remove all handlers from the root logger."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Send the log to its final stream and write out what was buffered."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##############################################################################
# settings

class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments=None):
        """Initialise settings."""
        if arguments is None:
            arguments = sys.argv[1:]
        lumberjack = Lumberjack()
        try:
            self._options = ArgumentParser().retrieve_options(list(arguments))
        except Exception:
            # don't lose messages logged while the buffer was in place
            lumberjack.reset()
            raise
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Get value of option; unspecified or empty options give the default."""
        value = self._options.get(name)
        if value is None or value == u'' or value == []:
            if get_default:
                return ARGUMENTS[name][u'default']
            return None
        return value

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')

    @property
    def logfile(self):
        """Log file name, or empty for standard error."""
        return self.get('logfile')

    @property
    def driver(self):
        """Video driver to request from the library."""
        return self.get('driver')

    @property
    def wait(self):
        """Time in milliseconds to run the event loop; zero means until quit."""
        return max(0, self.get('wait') or 0)

    @property
    def dll_paths(self):
        """Directories to search for the shared library, in order of preference."""
        return list(self.get('dll-path'))

    @property
    def window_params(self):
        """Return a dictionary of parameters for the window."""
        return {
            'title': self.get('title'),
            'width': self.get('width'),
            'height': self.get('height'),
            'fullscreen': self.get('fullscreen'),
            'resizable': self.get('resizable'),
            'borderless': self.get('borderless'),
        }


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Parse config file and command-line arguments."""

    def retrieve_options(self, argv):
        """Retrieve command line and config file options."""
        remaining = self._get_arguments_dict(argv)
        # config file settings first
        args = {}
        config_file = remaining.pop(u'config', None)
        if config_file:
            args.update(self._read_config_file(config_file))
        unrecognised = [(_k, _v) for _k, _v in args.items() if _k not in ARGUMENTS]
        for key, value in unrecognised:
            logging.warning(
                u'Ignored unrecognised option `%s=%s` in configuration file', key, value
            )
            del args[key]
        # command-line args override config file settings
        for key, value in remaining.items():
            if key not in ARGUMENTS:
                logging.warning(u'Ignored unrecognised command-line argument `%s`', key)
                continue
            args[key] = value
        self._convert_types(args)
        return args

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary."""
        args = {}
        arg_deque = deque(argv)
        while arg_deque:
            arg = arg_deque.popleft()
            if not arg.startswith(u'--') or arg == u'--':
                logging.warning(u'Ignored positional command-line argument `%s`', arg)
                continue
            key, _, value = arg[2:].partition(u'=')
            # strip enclosing quotes, but only if paired
            for quote in u'"\'':
                if len(value) > 1 and value.startswith(quote) and value.endswith(quote):
                    value = value[1:-1]
            if key in args and ARGUMENTS.get(key, {}).get(u'list') and args[key]:
                args[key] += u',' + value
            else:
                args[key] = value
        return args

    def _read_config_file(self, config_file):
        """Read the options section of a config file."""
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(f)
        except (configparser.Error, IOError):
            logging.warning(
                u'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        if not config.has_section(SECTION):
            logging.warning(u'No [%s] section in configuration file `%s`', SECTION, config_file)
            return {}
        # options given without a value count as specified
        return {_k: (_v or u'') for _k, _v in config.items(SECTION)}

    def _convert_types(self, args):
        """Convert arguments to required type."""
        for name in args:
            if ARGUMENTS[name].get(u'list'):
                args[name] = [
                    _item.strip() for _item in args[name].split(u',') if _item.strip()
                ]
            else:
                args[name] = self._parse_type(name, args[name])

    ##########################################################################
    # type conversions

    def _parse_type(self, name, arg):
        """Convert argument to required type."""
        argtype = ARGUMENTS[name][u'type']
        if argtype == u'int':
            return self._to_int(name, arg)
        elif argtype == u'bool':
            return self._to_bool(name, arg)
        return arg

    def _to_bool(self, argname, strval):
        """Convert bool string to bool. Empty string (i.e. specified) means True."""
        if strval == u'':
            return True
        if strval.upper() in TRUES:
            return True
        elif strval.upper() in FALSES:
            return False
        else:
            logging.warning(
                u'Boolean option `%s=%s` interpreted as `%s=True`',
                argname, strval, argname
            )
        return True

    def _to_int(self, argname, strval):
        """Convert int string to int."""
        if strval:
            try:
                return int(strval)
            except ValueError:
                logging.warning(
                    u'Option `%s=%s` ignored: value should be an integer',
                    argname, strval
                )
        return None
