"""String analysis core.

The analysis layer turns an arbitrary string into an immutable `AnalysisRecord` and exposes the
operations used by the bot through `AnalysisService`.
"""
