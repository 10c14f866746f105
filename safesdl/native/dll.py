"""
safesdl - native.dll
Locate and link the SDL 1.2 shared library

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

"""
The library search follows the approach of Marcus von Appen's pysdl2,
https://github.com/py-sdl/py-sdl2, which is distributed under the CC0
Public Domain Dedication with zlib licence fallback.
"""

import os
import sys
import logging
import platform
import warnings
from ctypes import CDLL
from ctypes.util import find_library


# possible names of the sdl 1.2 library
SDL_NAMES = ('SDL', 'SDL-1.2')

# environment variable holding extra directories to search, os.pathsep separated
DLL_PATH_VARIABLE = 'SAFESDL_DLL_PATH'

# non-standard brew library path on ARM64 Macs
ARM_BREW_PATH = '/opt/homebrew/lib'


def _platform_patterns(platform_name):
    """Filename patterns for shared libraries on the given platform."""
    if platform_name == 'win32':
        return ['{0}.dll']
    elif platform_name == 'darwin':
        return ['lib{0}.dylib', '{0}.framework/{0}', '{0}.framework/Versions/A/{0}']
    return ['lib{0}.so']


def _so_version_num(libname):
    """Extract the version number from an .so filename as a list of ints."""
    try:
        return [int(_part) for _part in libname.split('.so.')[1].split('.')]
    except ValueError:
        return []


def _find_libs_at_path(libnames, path, patterns):
    """Find libraries matching any of the given names in a specific directory."""
    results = []
    for libname in libnames:
        for pattern in patterns:
            dllfile = os.path.join(path, pattern.format(libname))
            if os.path.exists(dllfile):
                results.append(dllfile)
    # on Linux and similar, versioned files such as libSDL-1.2.so.0 in descending version order
    if sys.platform not in ('win32', 'darwin'):
        versioned = []
        for filename in os.listdir(path):
            if filename.startswith('.'):
                continue
            for libname in libnames:
                dllname = 'lib{0}.so.'.format(libname)
                if filename.startswith(dllname):
                    versioned.append(os.path.join(path, filename))
        versioned.sort(key=_so_version_num, reverse=True)
        results.extend(versioned)
    return results


def find_libraries(libnames, paths=()):
    """
    Find libraries with a given name and return their paths in a list.
    Libraries in the given directories take precedence over the system search path.
    """
    # debug builds carry a `d` suffix
    searchfor = list(libnames) + [_name + 'd' for _name in libnames]
    patterns = _platform_patterns(sys.platform)
    results = []
    for path in paths:
        if path and os.path.isdir(path):
            results.extend(_find_libs_at_path(searchfor, path, patterns))
    for libname in searchfor:
        dllfile = find_library(libname)
        if dllfile:
            # on Windows, need to specify relative or full path
            if os.name == 'nt' and not ('/' in dllfile or '\\' in dllfile):
                dllfile = './' + dllfile
            results.append(dllfile)
    if sys.platform == 'darwin' and platform.machine() == 'arm64' and os.path.isdir(ARM_BREW_PATH):
        results.extend(_find_libs_at_path(searchfor, ARM_BREW_PATH, patterns))
    return results


def env_paths():
    """Library directories given in the environment."""
    value = os.environ.get(DLL_PATH_VARIABLE, '')
    return [_path for _path in value.split(os.pathsep) if _path]


class DLLWarning(Warning):
    """A candidate library could not be loaded."""


class DLL(object):
    """Function binder for a loaded shared library."""

    def __init__(self, libinfo, libnames, paths=()):
        """Load the first usable library found."""
        self._dll = None
        self._libfile = None
        foundlibs = find_libraries(libnames, paths)
        if not foundlibs:
            raise RuntimeError(
                'could not find any library for %s (looked in: %s)' % (
                    libinfo, ', '.join(paths) or 'system paths'
                )
            )
        for libfile in foundlibs:
            try:
                self._dll = CDLL(libfile)
            except OSError as exc:
                # keep looking but let the user know something odd is going on
                warnings.warn(repr(exc), DLLWarning)
            else:
                self._libfile = libfile
                break
        if self._dll is None:
            raise RuntimeError(
                "found %s, but it's not usable for the library %s" % (foundlibs, libinfo)
            )
        logging.debug('Loaded %s from %s', libinfo, self._libfile)
        # add library path to the PATH environment on Windows, for dependent dlls
        libpath = os.path.dirname(self._libfile)
        if libpath and sys.platform == 'win32':
            os.environ['PATH'] = '%s;%s' % (libpath, os.environ['PATH'])

    def bind_function(self, funcname, args=None, returns=None, optfunc=None):
        """Bind argument and return types to the named function."""
        func = getattr(self._dll, funcname, None)
        if not func:
            if optfunc:
                warnings.warn(
                    "function '%s' not found in %r, using replacement" % (funcname, self._dll),
                    ImportWarning
                )
                return _nonexistent(funcname, optfunc)
            raise ValueError("could not find function '%s' in %r" % (funcname, self._dll))
        func.argtypes = args
        func.restype = returns
        return func

    @property
    def libfile(self):
        """Filename of the loaded library."""
        return self._libfile


def _nonexistent(funcname, func):
    """Wrap a replacement function to mark it as nonexistent in the library."""
    def wrapper(*fargs, **kw):
        warnings.warn('%s does not exist' % funcname, category=RuntimeWarning, stacklevel=2)
        return func(*fargs, **kw)
    wrapper.__name__ = func.__name__
    return wrapper


def load_dll(*library_paths):
    """
    Link to the SDL 1.2 library.
    Directories are searched in the order given, then those in SAFESDL_DLL_PATH,
    then the system search path. Raises ImportError if no usable library is found.
    """
    paths = tuple(library_paths) + tuple(env_paths())
    try:
        return DLL('SDL', SDL_NAMES, paths)
    except RuntimeError as exc:
        raise ImportError('Failed to load SDL library: %s' % (exc,))
