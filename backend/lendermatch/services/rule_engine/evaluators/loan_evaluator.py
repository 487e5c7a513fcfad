"""Loan size evaluators: revenue multiple and absolute loan range."""

from lendermatch.services.rule_engine.base import (
    CriterionOutcome,
    EvaluationContext,
    RuleEvaluator,
)


class RevenueMultipleEvaluator(RuleEvaluator):
    """
    Maximum requested amount as a multiple of monthly revenue.

    Compares ``funding <= max_multiple * revenue`` rather than dividing, so a
    zero monthly revenue exceeds any multiple for a positive request.
    """

    name = "revenue_multiple"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        max_multiple = context.criteria.max_monthly_revenue_multiple
        revenue = context.profile.monthly_revenue
        funding = context.profile.funding_amount

        if max_multiple is None or revenue is None or funding is None:
            return CriterionOutcome.skip()

        if funding > max_multiple * revenue:
            return CriterionOutcome.disqualify(
                f"Requested £{funding:,.2f} exceeds {max_multiple}x "
                f"monthly revenue of £{revenue:,.2f}"
            )

        return CriterionOutcome.award(
            context.weights.revenue_multiple,
            "Loan amount within revenue multiple",
        )


class LoanRangeEvaluator(RuleEvaluator):
    """Absolute minimum and maximum loan amount, checked as one range."""

    name = "loan_range"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        min_loan = context.criteria.absolute_min_loan
        max_loan = context.criteria.absolute_max_loan
        funding = context.profile.funding_amount

        if funding is None or (min_loan is None and max_loan is None):
            return CriterionOutcome.skip()

        if min_loan is not None and funding < min_loan:
            return CriterionOutcome.disqualify(
                f"Requested £{funding:,.2f} below lender minimum £{min_loan:,.2f}"
            )

        if max_loan is not None and funding > max_loan:
            return CriterionOutcome.disqualify(
                f"Requested £{funding:,.2f} exceeds lender maximum £{max_loan:,.2f}"
            )

        return CriterionOutcome.award(
            context.weights.loan_range,
            "Loan amount within range",
        )
