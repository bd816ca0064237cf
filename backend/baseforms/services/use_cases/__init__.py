from baseforms.services.use_cases.base_forms import BaseFormsHooks, SearchRequestContext

__all__ = ["BaseFormsHooks", "SearchRequestContext"]
