"""Directory-capable diff tools and how to call them.

``$LOCAL`` and ``$REMOTE`` are replaced by the left and right directories.
The first element is the executable; ``difftool.<name>.path`` replaces it,
and ``difftool.<name>.cmd`` bypasses the entry altogether. Only the
directory-mode argv is kept here; git's own per-tool scripts are not
consulted.
"""

_KNOWN_TOOLS: dict[str, list[str]] = {
    "araxis": ["compare", "-wait", "$LOCAL", "$REMOTE"],
    "bc": ["bcompare", "$LOCAL", "$REMOTE"],
    "bc3": ["bcompare", "$LOCAL", "$REMOTE"],
    "bc4": ["bcompare", "$LOCAL", "$REMOTE"],
    "codecompare": ["CodeCompare", "$LOCAL", "$REMOTE"],
    "deltawalker": ["DeltaWalker", "-nosplash", "$LOCAL", "$REMOTE"],
    "diffmerge": ["diffmerge", "$LOCAL", "$REMOTE"],
    "diffuse": ["diffuse", "$LOCAL", "$REMOTE"],
    "ecmerge": ["ecmerge", "--default", "--mode=diff2", "$LOCAL", "$REMOTE"],
    "kdiff3": ["kdiff3", "--L1", "$LOCAL", "--L2", "$REMOTE", "$LOCAL", "$REMOTE"],
    "kompare": ["kompare", "$LOCAL", "$REMOTE"],
    "meld": ["meld", "$LOCAL", "$REMOTE"],
    "opendiff": ["opendiff", "$LOCAL", "$REMOTE"],
    "p4merge": ["p4merge", "$LOCAL", "$REMOTE"],
    "tkdiff": ["tkdiff", "$LOCAL", "$REMOTE"],
    "vscode": ["code", "--wait", "--diff", "$LOCAL", "$REMOTE"],
    "winmerge": ["WinMergeU", "-r", "-u", "-e", "$LOCAL", "$REMOTE"],
    "xxdiff": ["xxdiff", "$LOCAL", "$REMOTE"],
}
