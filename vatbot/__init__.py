# -*- coding: utf-8 -*-
"""VAT bookkeeping bot: shorthand lines in, net/VAT/gross ledger out."""
