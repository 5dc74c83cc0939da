from brkga.mutations.base_mutation import BaseMutation
from brkga.mutations.key_mutations import RandomKeyMutation

__all__ = ['BaseMutation', 'RandomKeyMutation']
