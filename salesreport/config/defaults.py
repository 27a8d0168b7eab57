DEFAULT_CONFIG = {
    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
    },

    # -----------------------------
    # SUMMARY RENDERING
    # -----------------------------
    "summary": {
        "date_format": "%d/%m/%Y",
        "labels": {
            "banner": "Generating report",
            "format": "Format",
            "period": "Period",
            "period_separator": "to",
            "header": "Header",
            "logo": "Logo",
            "charts": "Chart",
            "columns": "Columns",
            "filters": "Filters",
            "group_by": "Grouped by",
            "sort_by": "Sorted by",
            "totals": "Totals",
            "summary": "Summary",
            "page": "Page",
            "page_numbers": "Page numbers",
            "watermark": "Watermark",
            "footer": "Footer",
            "enabled": "Yes",
            "done": "Report generated successfully!",
        },
    },

    # -----------------------------
    # DEMO SCENARIOS
    # -----------------------------
    "demo": {
        "year": 2024,
    },
}
