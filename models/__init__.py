from abc import ABC, abstractmethod

class BaseModel(ABC):
    """Base class for screen view models"""
    
    @abstractmethod
    def initialize(self):
        """Reset the model to its freshly mounted state"""
        pass
