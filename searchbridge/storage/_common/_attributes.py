class SpecialAttribute:
    ID = "$id"
    SCORE = "$score"
    RANDOM = "$random"


class SpecialSortField:
    SCORE = "_score"
    SEQ_NO = "_seq_no"
