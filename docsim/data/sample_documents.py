"""유사도 데모용 샘플 문서 (띄어쓰기/문장부호만 다른 변형 포함)"""
from typing import List

SAMPLE_DOCUMENTS: List[str] = [
    "中  一遍又一遍地  “真”、“好”和“吃”  上摔下来，  爬上结满很多红果子  是伤，还不  就在这时  的>树。可是，他们都  大会爬树",
    "“真”、“好”和“吃” 爬上结满很多红果子 的树。可是，他们都 不太会爬树，, ",
    " “真”、“好”和“吃”  爬上结满很多红果子  的树。可是，他们都  不太会爬树， , ",
    "一遍又一遍地 上摔下来，满 真”、“好”和“吃” 是伤，还不愿 飞上结满很多红果子 就在这时· 的树。可>是，他们都 不太会爬树，,",
    "一遍又一遍地  上摔下来，满  真”、“好”和“吃”  是伤，还不愿  飞上结满很多红果子  就在这时·  的>树。可是，他们都  不太会爬树， , ",
    "一遍又一遍地 “好”和“吃” 上摔下来，满 满很多红果子 是伤，还不愿 可是，他们都 就在这时…· 爬树",
    "一遍又一遍地  “好”和“吃”  上摔下来，满  满很多红果子  是伤，还不愿  可是，他们都  就在这时…·  爬树， , ",
]
