from .mock_directory import MockStaffDirectory

__all__ = ['MockStaffDirectory']
