"""Microsoft Translator のプロトコル別実装"""
