"""
Stripe Decline Codes: Built-in Dataset

The decline codes documented by Stripe, with merchant guidance,
customer-facing messages, and Japanese translations.

DOC_VERSION records the revision of the Stripe decline code documentation
this table reflects. Codes are defined in the order Stripe lists them; that
order is what get_all_decline_codes() returns.
"""

from __future__ import annotations

from ..models import DeclineCategory, DeclineRecord, Translation


DOC_VERSION = "2024-12-18"

SOFT = DeclineCategory.SOFT_DECLINE
HARD = DeclineCategory.HARD_DECLINE


# =============================================================================
# Shared Texts
# =============================================================================

# Stripe reuses these descriptions across several issuer responses.
_UNKNOWN_REASON = "The card was declined for an unknown reason."
_UNKNOWN_REASON_JA = "不明な理由でカードが拒否されました。"

_CONTACT_ISSUER_STEPS = "The customer needs to contact their card issuer for more information."
_SHOULD_CONTACT_ISSUER_STEPS = "The customer should contact their card issuer for more information."
_GENERIC_DECLINE_STEPS = (
    "Don't report more detailed information to your customer. "
    "Instead, present as you would the generic_decline."
)
_RETRY_THEN_ISSUER_STEPS = (
    "The payment should be attempted again. If it still can't be processed, "
    "the customer needs to contact their card issuer."
)

_CONTACT_ISSUER_MESSAGE = "Your card was declined. Please contact your card issuer for more information."
_CONTACT_ISSUER_MESSAGE_JA = "カードが拒否されました。詳細はカード発行会社にお問い合わせください。"

_USE_OTHER_METHOD_MESSAGE = (
    "Your card was declined. Please contact your card issuer "
    "or use a different payment method."
)
_USE_OTHER_METHOD_MESSAGE_JA = (
    "カードが拒否されました。カード発行会社にお問い合わせいただくか、"
    "別のお支払い方法をご利用ください。"
)

_RETRY_MESSAGE = "Please try again. If the problem persists, contact your card issuer."
_RETRY_MESSAGE_JA = "もう一度お試しください。問題が解決しない場合は、カード発行会社にお問い合わせください。"

_ALTERNATIVE_METHOD_MESSAGE = "Please try again using an alternative payment method."
_ALTERNATIVE_METHOD_MESSAGE_JA = "別のお支払い方法を使用してもう一度お試しください。"


def create_stripe_decline_codes() -> dict[str, DeclineRecord]:
    """
    Create the built-in decline code table.

    Returns a plain dict in definition order; the registry wraps it in a
    read-only view.
    """
    codes: dict[str, DeclineRecord] = {}

    codes["authentication_required"] = DeclineRecord(
        code="authentication_required",
        category=SOFT,
        description="The card was declined as the transaction requires authentication.",
        next_steps="The customer should try again and authenticate their card when prompted "
                   "during the transaction. If the card issuer returns this decline code on an "
                   "authenticated transaction, the customer needs to contact their card issuer "
                   "for more information.",
        next_user_action="Please try again and complete the authentication when prompted.",
        translations={
            "ja": Translation(
                description="取引に認証が必要なため、カードが拒否されました。",
                next_user_action="もう一度お試しいただき、表示される認証手続きを完了してください。",
            ),
        },
    )

    codes["approve_with_id"] = DeclineRecord(
        code="approve_with_id",
        category=SOFT,
        description="The payment can't be authorized.",
        next_steps=_RETRY_THEN_ISSUER_STEPS,
        next_user_action=_RETRY_MESSAGE,
        translations={
            "ja": Translation(
                description="支払いを承認できません。",
                next_user_action=_RETRY_MESSAGE_JA,
            ),
        },
    )

    codes["call_issuer"] = DeclineRecord(
        code="call_issuer",
        category=SOFT,
        description=_UNKNOWN_REASON,
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["card_not_supported"] = DeclineRecord(
        code="card_not_supported",
        category=HARD,
        description="The card doesn't support this type of purchase.",
        next_steps="The customer needs to contact their card issuer to make sure their card "
                   "can be used to make this type of purchase.",
        next_user_action="Your card does not support this type of purchase. Please use a different card.",
        translations={
            "ja": Translation(
                description="このカードはこの種類の購入に対応していません。",
                next_user_action="お使いのカードはこの種類の購入に対応していません。別のカードをご利用ください。",
            ),
        },
    )

    codes["card_velocity_exceeded"] = DeclineRecord(
        code="card_velocity_exceeded",
        category=SOFT,
        description="The customer has exceeded the balance, credit limit, or transaction amount "
                    "limit available on their card.",
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action="Your card has reached its limit. Please contact your card issuer "
                         "or use a different payment method.",
        translations={
            "ja": Translation(
                description="カードの残高、利用限度額、または取引金額の上限を超えています。",
                next_user_action="カードの利用上限に達しています。カード発行会社にお問い合わせいただくか、"
                                 "別のお支払い方法をご利用ください。",
            ),
        },
    )

    codes["currency_not_supported"] = DeclineRecord(
        code="currency_not_supported",
        category=HARD,
        description="The card doesn't support the specified currency.",
        next_steps="The customer needs to check with the issuer whether the card can be used "
                   "for the type of currency specified.",
        next_user_action="Your card does not support this currency. Please use a different card.",
        translations={
            "ja": Translation(
                description="このカードは指定された通貨に対応していません。",
                next_user_action="お使いのカードはこの通貨に対応していません。別のカードをご利用ください。",
            ),
        },
    )

    codes["do_not_honor"] = DeclineRecord(
        code="do_not_honor",
        category=SOFT,
        description=_UNKNOWN_REASON,
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["do_not_try_again"] = DeclineRecord(
        code="do_not_try_again",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action=_USE_OTHER_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_USE_OTHER_METHOD_MESSAGE_JA,
            ),
        },
    )

    codes["duplicate_transaction"] = DeclineRecord(
        code="duplicate_transaction",
        category=SOFT,
        description="A transaction with identical amount and credit card information was "
                    "submitted very recently.",
        next_steps="Check to see if a recent payment already exists.",
        next_user_action="An identical payment was submitted recently. "
                         "Please check whether your payment has already been completed.",
        translations={
            "ja": Translation(
                description="同じ金額とカード情報の取引がごく最近送信されています。",
                next_user_action="同じお支払いが最近行われています。お支払いがすでに完了していないかご確認ください。",
            ),
        },
    )

    codes["expired_card"] = DeclineRecord(
        code="expired_card",
        category=HARD,
        description="The card has expired.",
        next_steps="The customer should use another card.",
        next_user_action="Your card has expired. Please use a different card.",
        translations={
            "ja": Translation(
                description="カードの有効期限が切れています。",
                next_user_action="カードの有効期限が切れています。別のカードをご利用ください。",
            ),
        },
    )

    codes["fraudulent"] = DeclineRecord(
        code="fraudulent",
        category=HARD,
        description="The payment was declined because Stripe suspects that it's fraudulent.",
        next_steps=_GENERIC_DECLINE_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description="不正利用の疑いがあるため、支払いが拒否されました。",
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["generic_decline"] = DeclineRecord(
        code="generic_decline",
        category=SOFT,
        description="The card has been declined for an unknown reason.",
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["incorrect_number"] = DeclineRecord(
        code="incorrect_number",
        category=SOFT,
        description="The card number is incorrect.",
        next_steps="The customer should try again using the correct card number.",
        next_user_action="Your card number is incorrect. Please check the number and try again.",
        translations={
            "ja": Translation(
                description="カード番号が正しくありません。",
                next_user_action="カード番号が正しくありません。番号をご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["incorrect_cvc"] = DeclineRecord(
        code="incorrect_cvc",
        category=SOFT,
        description="The CVC number is incorrect.",
        next_steps="The customer should try again using the correct CVC.",
        next_user_action="Your card's security code is incorrect. Please check it and try again.",
        translations={
            "ja": Translation(
                description="CVC番号が正しくありません。",
                next_user_action="カードのセキュリティコードが正しくありません。ご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["incorrect_pin"] = DeclineRecord(
        code="incorrect_pin",
        category=SOFT,
        description="The PIN entered is incorrect. This decline code only applies to payments "
                    "made with a card reader.",
        next_steps="The customer should try again using the correct PIN.",
        next_user_action="The PIN you entered is incorrect. Please try again.",
        translations={
            "ja": Translation(
                description="入力されたPINが正しくありません。この拒否コードはカードリーダーでの支払いにのみ適用されます。",
                next_user_action="入力されたPINが正しくありません。もう一度お試しください。",
            ),
        },
    )

    codes["incorrect_zip"] = DeclineRecord(
        code="incorrect_zip",
        category=SOFT,
        description="The postal code is incorrect.",
        next_steps="The customer should try again using the correct billing postal code.",
        next_user_action="Your postal code is incorrect. Please check it and try again.",
        translations={
            "ja": Translation(
                description="郵便番号が正しくありません。",
                next_user_action="郵便番号が正しくありません。ご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["insufficient_funds"] = DeclineRecord(
        code="insufficient_funds",
        category=SOFT,
        description="The card has insufficient funds to complete the purchase.",
        next_steps="The customer should use an alternative payment method.",
        next_user_action=_ALTERNATIVE_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description="カードの購入に必要な資金が不足しています。",
                next_user_action=_ALTERNATIVE_METHOD_MESSAGE_JA,
            ),
        },
    )

    codes["invalid_account"] = DeclineRecord(
        code="invalid_account",
        category=HARD,
        description="The card, or account the card is connected to, is invalid.",
        next_steps="The customer needs to contact their card issuer to check that the card "
                   "is working correctly.",
        next_user_action="Your card account is invalid. Please contact your card issuer "
                         "or use a different card.",
        translations={
            "ja": Translation(
                description="カード、またはカードに紐づくアカウントが無効です。",
                next_user_action="カードのアカウントが無効です。カード発行会社にお問い合わせいただくか、"
                                 "別のカードをご利用ください。",
            ),
        },
    )

    codes["invalid_amount"] = DeclineRecord(
        code="invalid_amount",
        category=SOFT,
        description="The payment amount is invalid, or exceeds the amount that's allowed.",
        next_steps="If the amount appears to be correct, the customer needs to check with their "
                   "card issuer that they can make purchases of that amount.",
        next_user_action="The payment amount is not allowed for your card. "
                         "Please contact your card issuer.",
        translations={
            "ja": Translation(
                description="支払い金額が無効か、許可されている金額を超えています。",
                next_user_action="この金額はお使いのカードでは許可されていません。カード発行会社にお問い合わせください。",
            ),
        },
    )

    codes["invalid_cvc"] = DeclineRecord(
        code="invalid_cvc",
        category=SOFT,
        description="The CVC number is incorrect.",
        next_steps="The customer should try again using the correct CVC.",
        next_user_action="Your card's security code is incorrect. Please check it and try again.",
        translations={
            "ja": Translation(
                description="CVC番号が正しくありません。",
                next_user_action="カードのセキュリティコードが正しくありません。ご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["invalid_expiry_month"] = DeclineRecord(
        code="invalid_expiry_month",
        category=SOFT,
        description="The expiration month is invalid.",
        next_steps="The customer should try again using the correct expiration date.",
        next_user_action="Your card's expiration month is invalid. Please check it and try again.",
        translations={
            "ja": Translation(
                description="有効期限の月が無効です。",
                next_user_action="カードの有効期限（月）が無効です。ご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["invalid_expiry_year"] = DeclineRecord(
        code="invalid_expiry_year",
        category=SOFT,
        description="The expiration year is invalid.",
        next_steps="The customer should try again using the correct expiration date.",
        next_user_action="Your card's expiration year is invalid. Please check it and try again.",
        translations={
            "ja": Translation(
                description="有効期限の年が無効です。",
                next_user_action="カードの有効期限（年）が無効です。ご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["invalid_number"] = DeclineRecord(
        code="invalid_number",
        category=SOFT,
        description="The card number is incorrect.",
        next_steps="The customer should try again using the correct card number.",
        next_user_action="Your card number is incorrect. Please check the number and try again.",
        translations={
            "ja": Translation(
                description="カード番号が正しくありません。",
                next_user_action="カード番号が正しくありません。番号をご確認のうえ、もう一度お試しください。",
            ),
        },
    )

    codes["invalid_pin"] = DeclineRecord(
        code="invalid_pin",
        category=SOFT,
        description="The PIN entered is incorrect. This decline code only applies to payments "
                    "made with a card reader.",
        next_steps="The customer should try again using the correct PIN.",
        next_user_action="The PIN you entered is incorrect. Please try again.",
        translations={
            "ja": Translation(
                description="入力されたPINが正しくありません。この拒否コードはカードリーダーでの支払いにのみ適用されます。",
                next_user_action="入力されたPINが正しくありません。もう一度お試しください。",
            ),
        },
    )

    codes["issuer_not_available"] = DeclineRecord(
        code="issuer_not_available",
        category=SOFT,
        description="The card issuer couldn't be reached, so the payment couldn't be authorized.",
        next_steps=_RETRY_THEN_ISSUER_STEPS,
        next_user_action="Your card issuer could not be reached. Please try again later.",
        translations={
            "ja": Translation(
                description="カード発行会社に接続できなかったため、支払いを承認できませんでした。",
                next_user_action="カード発行会社に接続できませんでした。しばらくしてからもう一度お試しください。",
            ),
        },
    )

    codes["lost_card"] = DeclineRecord(
        code="lost_card",
        category=HARD,
        description="The payment was declined because the card is reported lost.",
        next_steps="The specific reason for the decline shouldn't be reported to the customer. "
                   "Instead, it needs to be presented as a generic decline.",
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description="カードの紛失届が出されているため、支払いが拒否されました。",
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["merchant_blacklist"] = DeclineRecord(
        code="merchant_blacklist",
        category=HARD,
        description="The payment was declined because it matches a value on the Stripe user's "
                    "block list.",
        next_steps=_GENERIC_DECLINE_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description="Stripe ユーザーのブロックリストの値と一致したため、支払いが拒否されました。",
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["new_account_information_available"] = DeclineRecord(
        code="new_account_information_available",
        category=HARD,
        description="The card, or account the card is connected to, is invalid.",
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action="Your card information has been updated by your card issuer. "
                         "Please contact your card issuer or use a different card.",
        translations={
            "ja": Translation(
                description="カード、またはカードに紐づくアカウントが無効です。",
                next_user_action="カード情報がカード発行会社によって更新されています。"
                                 "カード発行会社にお問い合わせいただくか、別のカードをご利用ください。",
            ),
        },
    )

    codes["no_action_taken"] = DeclineRecord(
        code="no_action_taken",
        category=SOFT,
        description=_UNKNOWN_REASON,
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["not_permitted"] = DeclineRecord(
        code="not_permitted",
        category=HARD,
        description="The payment isn't permitted.",
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action="This payment is not permitted on your card. Please contact your card issuer.",
        translations={
            "ja": Translation(
                description="この支払いは許可されていません。",
                next_user_action="このお支払いはお使いのカードでは許可されていません。カード発行会社にお問い合わせください。",
            ),
        },
    )

    codes["offline_pin_required"] = DeclineRecord(
        code="offline_pin_required",
        category=SOFT,
        description="The card was declined because it requires a PIN.",
        next_steps="The customer should try again by inserting their card and entering a PIN.",
        next_user_action="Please insert your card and enter your PIN.",
        translations={
            "ja": Translation(
                description="PINが必要なため、カードが拒否されました。",
                next_user_action="カードを挿入し、PINを入力してください。",
            ),
        },
    )

    codes["online_or_offline_pin_required"] = DeclineRecord(
        code="online_or_offline_pin_required",
        category=SOFT,
        description="The card was declined as it requires a PIN.",
        next_steps="If the card reader supports Online PIN, the customer should be prompted for a "
                   "PIN without a new transaction being created. If the card reader doesn't support "
                   "Online PIN, the customer should try again by inserting their card and entering a PIN.",
        next_user_action="Please enter your PIN to complete the payment.",
        translations={
            "ja": Translation(
                description="PINが必要なため、カードが拒否されました。",
                next_user_action="お支払いを完了するにはPINを入力してください。",
            ),
        },
    )

    codes["pickup_card"] = DeclineRecord(
        code="pickup_card",
        category=HARD,
        description="The customer can't use this card to make this payment (it's possible it was "
                    "reported lost or stolen).",
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action="Your card cannot be used for this payment. Please contact your card issuer.",
        translations={
            "ja": Translation(
                description="このカードはこの支払いに使用できません（紛失または盗難の届けが出されている可能性があります）。",
                next_user_action="このカードはお支払いにご利用いただけません。カード発行会社にお問い合わせください。",
            ),
        },
    )

    codes["pin_try_exceeded"] = DeclineRecord(
        code="pin_try_exceeded",
        category=SOFT,
        description="The allowable number of PIN tries was exceeded.",
        next_steps="The customer must use another card or method of payment.",
        next_user_action="You have exceeded the number of allowed PIN attempts. "
                         "Please use a different card or payment method.",
        translations={
            "ja": Translation(
                description="PINの入力可能回数を超えました。",
                next_user_action="PINの入力回数の上限を超えました。別のカードまたはお支払い方法をご利用ください。",
            ),
        },
    )

    codes["processing_error"] = DeclineRecord(
        code="processing_error",
        category=SOFT,
        description="An error occurred while processing the card.",
        next_steps="The payment should be attempted again. If it still can't be processed, "
                   "try again later.",
        next_user_action="An error occurred while processing your card. Please try again later.",
        translations={
            "ja": Translation(
                description="カードの処理中にエラーが発生しました。",
                next_user_action="カードの処理中にエラーが発生しました。しばらくしてからもう一度お試しください。",
            ),
        },
    )

    codes["reenter_transaction"] = DeclineRecord(
        code="reenter_transaction",
        category=SOFT,
        description="The payment couldn't be processed by the issuer for an unknown reason.",
        next_steps=_RETRY_THEN_ISSUER_STEPS,
        next_user_action=_RETRY_MESSAGE,
        translations={
            "ja": Translation(
                description="不明な理由により、カード発行会社が支払いを処理できませんでした。",
                next_user_action=_RETRY_MESSAGE_JA,
            ),
        },
    )

    codes["restricted_card"] = DeclineRecord(
        code="restricted_card",
        category=HARD,
        description="The customer can't use this card to make this payment (it's possible it was "
                    "reported lost or stolen).",
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action="Your card cannot be used for this payment. Please contact your card issuer.",
        translations={
            "ja": Translation(
                description="このカードはこの支払いに使用できません（紛失または盗難の届けが出されている可能性があります）。",
                next_user_action="このカードはお支払いにご利用いただけません。カード発行会社にお問い合わせください。",
            ),
        },
    )

    codes["revocation_of_all_authorizations"] = DeclineRecord(
        code="revocation_of_all_authorizations",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action=_USE_OTHER_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_USE_OTHER_METHOD_MESSAGE_JA,
            ),
        },
    )

    codes["revocation_of_authorization"] = DeclineRecord(
        code="revocation_of_authorization",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action=_USE_OTHER_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_USE_OTHER_METHOD_MESSAGE_JA,
            ),
        },
    )

    codes["security_violation"] = DeclineRecord(
        code="security_violation",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["service_not_allowed"] = DeclineRecord(
        code="service_not_allowed",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["stolen_card"] = DeclineRecord(
        code="stolen_card",
        category=HARD,
        description="The payment was declined because the card is reported stolen.",
        next_steps="The specific reason for the decline shouldn't be reported to the customer. "
                   "Instead, it needs to be presented as a generic decline.",
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description="カードの盗難届が出されているため、支払いが拒否されました。",
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["stop_payment_order"] = DeclineRecord(
        code="stop_payment_order",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_SHOULD_CONTACT_ISSUER_STEPS,
        next_user_action=_USE_OTHER_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_USE_OTHER_METHOD_MESSAGE_JA,
            ),
        },
    )

    codes["testmode_decline"] = DeclineRecord(
        code="testmode_decline",
        category=HARD,
        description="A Stripe test card number was used.",
        next_steps="A genuine card must be used to make a payment.",
        next_user_action="A test card was used. Please use a valid card.",
        translations={
            "ja": Translation(
                description="Stripe のテスト用カード番号が使用されました。",
                next_user_action="テスト用カードが使用されました。有効なカードをご利用ください。",
            ),
        },
    )

    codes["transaction_not_allowed"] = DeclineRecord(
        code="transaction_not_allowed",
        category=HARD,
        description=_UNKNOWN_REASON,
        next_steps=_CONTACT_ISSUER_STEPS,
        next_user_action=_CONTACT_ISSUER_MESSAGE,
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action=_CONTACT_ISSUER_MESSAGE_JA,
            ),
        },
    )

    codes["try_again_later"] = DeclineRecord(
        code="try_again_later",
        category=SOFT,
        description=_UNKNOWN_REASON,
        next_steps="Ask the customer to attempt the payment again. If subsequent payments are "
                   "declined, the customer should contact their card issuer for more information.",
        next_user_action="Your card was declined. Please try again later.",
        translations={
            "ja": Translation(
                description=_UNKNOWN_REASON_JA,
                next_user_action="カードが拒否されました。しばらくしてからもう一度お試しください。",
            ),
        },
    )

    codes["withdrawal_count_limit_exceeded"] = DeclineRecord(
        code="withdrawal_count_limit_exceeded",
        category=SOFT,
        description="The customer has exceeded the balance or credit limit available on their card.",
        next_steps="The customer should use an alternative payment method.",
        next_user_action=_ALTERNATIVE_METHOD_MESSAGE,
        translations={
            "ja": Translation(
                description="カードの残高または利用限度額を超えています。",
                next_user_action=_ALTERNATIVE_METHOD_MESSAGE_JA,
            ),
        },
    )

    return codes


__all__ = [
    "DOC_VERSION",
    "create_stripe_decline_codes",
]
