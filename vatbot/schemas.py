"""
JSON Schema definitions for Structured Output

Shape of the classifier reply; parse_fields() still reads it leniently.
"""

from vatbot.rules import allowed_categories

# Note: strict=False so a partial reply is still returned and defaults fill the gaps
CLASSIFIER_RESPONSE_SCHEMA = {
    "name": "vat_line_classification",
    "strict": False,
    "schema": {
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "enum": ["income", "expense"],
                "description": "Entry direction"
            },
            "amount_type": {
                "type": "string",
                "enum": ["net", "gross", "unknown"],
                "description": "Whether the typed amount excludes or includes VAT"
            },
            "vat_applicable": {
                "type": "boolean",
                "description": "Whether VAT applies to this line"
            },
            "category": {
                "type": "string",
                "enum": list(allowed_categories()),
                "description": "Bookkeeping category"
            },
            "description": {
                "type": "string",
                "description": "Short description"
            },
            "date": {
                "type": "string",
                "description": "Date in YYYY-MM-DD format"
            }
        },
        "required": ["type", "amount_type", "vat_applicable", "category", "description"]
    }
}
