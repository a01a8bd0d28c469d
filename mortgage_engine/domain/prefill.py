"""Calculator prefill from an externally produced document analysis"""

from mortgage_engine.domain.models import CalculatorPrefill, DocumentAnalysis


def prefill_from_document(analysis: DocumentAnalysis) -> CalculatorPrefill:
    """
    Copy whatever the document analysis identified into calculator inputs.

    The analysis is an untrusted suggestion: values are copied as-is and only
    validated when they are turned into LoanTerms. Monthly debts are the sum
    of the extracted debts, left unset when none were found.
    """
    terms = analysis.identified_mortgage_terms
    debts = analysis.extracted_debts

    return CalculatorPrefill(
        principal=terms.principal,
        annual_rate=terms.rate,
        amortization_years=terms.amortization,
        gross_annual_income=analysis.extracted_income,
        monthly_debts=sum(debts) if debts else None,
    )
