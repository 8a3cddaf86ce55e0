"""git-diffall: recursive directory diff of git revisions in an external tool."""
