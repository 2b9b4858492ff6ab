"""SkyPath - formulário de busca de voos para terminal"""

__version__ = "0.1.0"
