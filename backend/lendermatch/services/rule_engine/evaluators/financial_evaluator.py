"""Financial evaluators: card takings, profitability, net assets."""

from lendermatch.services.rule_engine.base import (
    CriterionOutcome,
    EvaluationContext,
    RuleEvaluator,
)


class CardPaymentsEvaluator(RuleEvaluator):
    """
    Minimum share of revenue taken by card.

    Active only when the lender sets both the requirement flag and the
    minimum. When card payments are required, an unknown percentage fails
    the check.
    """

    name = "card_payments"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        minimum = context.criteria.min_card_payment_percentage
        requires = context.criteria.requires_card_payments
        if requires is None or minimum is None:
            return CriterionOutcome.skip()

        percentage = context.profile.card_payment_percentage
        meets_minimum = percentage is not None and percentage >= minimum

        if requires and not meets_minimum:
            return CriterionOutcome.disqualify(
                f"Lender requires at least {minimum}% of revenue from card payments"
            )

        if meets_minimum:
            return CriterionOutcome.award(
                context.weights.card_payments,
                "Meets card payment requirement",
            )

        return CriterionOutcome.skip()


class ProfitabilityEvaluator(RuleEvaluator):
    """Positive annual profit."""

    name = "profitability"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        requires = context.criteria.requires_profitable
        profit = context.profile.annual_profit

        if requires is None or profit is None:
            return CriterionOutcome.skip()

        if requires and profit <= 0:
            return CriterionOutcome.disqualify(
                f"Lender requires a profitable business (annual profit £{profit:,.2f})"
            )

        if profit > 0:
            return CriterionOutcome.award(
                context.weights.profitable,
                "Profitable business",
            )

        return CriterionOutcome.skip()


class NetAssetsEvaluator(RuleEvaluator):
    """Positive net assets."""

    name = "net_assets"

    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        requires = context.criteria.requires_positive_net_assets
        net_assets = context.profile.net_assets

        if requires is None or net_assets is None:
            return CriterionOutcome.skip()

        if requires and net_assets <= 0:
            return CriterionOutcome.disqualify(
                f"Lender requires positive net assets (net assets £{net_assets:,.2f})"
            )

        if net_assets > 0:
            return CriterionOutcome.award(
                context.weights.net_assets,
                "Positive net assets",
            )

        return CriterionOutcome.skip()
