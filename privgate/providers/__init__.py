"""
Concrete collaborators: authorization brokers, settings storage,
notification sinks and script runners.
"""
