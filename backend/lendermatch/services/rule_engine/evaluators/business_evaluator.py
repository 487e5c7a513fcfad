"""Business profile evaluators: trading time, revenue, business type, industry."""

from lendermatch.services.rule_engine.base import (
    CriterionOutcome,
    EvaluationContext,
    RuleEvaluator,
)


class TradingTimeEvaluator(RuleEvaluator):
    """Minimum months of trading."""

    name = "trading_time"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        required = context.criteria.min_trading_months
        actual = context.profile.trading_months

        if required is None or actual is None:
            return CriterionOutcome.skip()

        if actual < required:
            return CriterionOutcome.disqualify(
                f"Trading for about {actual} months, lender requires {required}"
            )

        return CriterionOutcome.award(
            context.weights.trading_time,
            "Meets minimum trading time requirement",
        )


class MonthlyRevenueEvaluator(RuleEvaluator):
    """Minimum monthly revenue."""

    name = "monthly_revenue"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        required = context.criteria.min_monthly_revenue
        revenue = context.profile.monthly_revenue

        if required is None or revenue is None:
            return CriterionOutcome.skip()

        if revenue < required:
            return CriterionOutcome.disqualify(
                f"Monthly revenue £{revenue:,.2f} is below minimum £{required:,.2f}"
            )

        return CriterionOutcome.award(
            context.weights.monthly_revenue,
            "Meets minimum monthly revenue",
        )


class BusinessTypeEvaluator(RuleEvaluator):
    """
    Accepted business types (allow-list).

    Unlike most criteria, an unknown business type fails the check when the
    lender restricts business types.
    """

    name = "business_type"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        accepted = context.criteria.accepted_business_types
        if not accepted:
            return CriterionOutcome.skip()

        business_type = context.profile.business_type
        if business_type is None:
            return CriterionOutcome.disqualify(
                f"Business type unknown; lender accepts only {', '.join(accepted)}"
            )

        if business_type.value not in accepted:
            return CriterionOutcome.disqualify(
                f"Business type '{business_type.value}' is not accepted. "
                f"Accepted: {', '.join(accepted)}"
            )

        return CriterionOutcome.award(
            context.weights.business_type,
            "Accepts your business type",
        )


class IndustryEvaluator(RuleEvaluator):
    """Prohibited industries (deny-list)."""

    name = "industry"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        prohibited = context.criteria.prohibited_industries
        industry = context.profile.industry

        if not prohibited or industry is None:
            return CriterionOutcome.skip()

        if industry.value in prohibited:
            return CriterionOutcome.disqualify(
                f"Industry '{industry.value}' is prohibited by lender"
            )

        return CriterionOutcome.award(
            context.weights.industry,
            "Industry not prohibited",
        )
