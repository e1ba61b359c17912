"""
propmatch

Núcleo de negocio del CRM inmobiliario:
- Matching: score de compatibilidad cliente-propiedad
- Importer: normalización de enums y validación de filas importadas
"""

__version__ = "0.1.0"
