"""
HTML 基础设施模块

提供文档读取和解析功能。
"""
from .document_loader import DocumentLoader

__all__ = ['DocumentLoader']
