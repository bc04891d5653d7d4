import re


# Longest operators first, so that "<=" is never read as "<" followed by "=".
RELATIONAL_OPERATOR = re.compile(r'(>=|<=|==|!=|>|<)')

GLOB_CHARS = re.compile(r'[*?\[]')

# A run of digits or a run of anything else.
VERSION_COMPONENT = re.compile(r'(?P<number>[0-9]+)|[^0-9]+')

NUMBER = re.compile(r'[0-9]+\Z')

# "name-[0-9]*", the most common pkgsrc dependency pattern.
VERSIONED_GLOB = re.compile(r"""
^
(?P<base>[A-Za-z0-9_+.\-]+)
-
\[0-9\]
\*
$
""", re.X)

PKGPATH = re.compile(r"""
^
(\.\./\.\./)?
(?P<category>[^/.][^/]*)
/
(?P<package>[^/.][^/]*)
/?
$
""", re.X)

SIMPLE_CHAR = re.compile(r'[A-Za-z0-9\-]')
