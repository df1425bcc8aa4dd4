from privgate.providers.broker.base import AuthorizationBroker, DecisionListener
from privgate.providers.broker.memory import InMemoryBroker

__all__ = ["AuthorizationBroker", "DecisionListener", "InMemoryBroker"]
