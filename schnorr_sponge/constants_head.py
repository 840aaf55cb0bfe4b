"""Leading round constants of the Poseidon BN254 width-5 permutation.

The constants are stored as big-endian hex strings with a ``0x`` prefix,
in the order the permutation consumes them. The first 20 belong to the
opening full rounds; the remainder start the partial rounds.
"""

_ROUND_CONSTANTS_HEAD: tuple[str, ...] = (
    "0x0eb544fee2815dda7f53e29ccac98ed7d889bb4ebd47c3864f3c2bd81a6da891",
    "0x0554d736315b8662f02fdba7dd737fbca197aeb12ea64713ba733f28475128cb",
    "0x2f83b9df259b2b68bcd748056307c37754907df0c0fb0035f5087c58d5e8c2d4",
    "0x2ca70e2e8d7f39a12447ac83052451b461f15f8b41a75ef31915208f5aba9683",
    "0x1cb5f9319be6a45e91b04d7222271c94994196f12ed22c5d4ec719cb83ecfea9",
    "0x2eb4f99c69f966ebf8a42192de7ff61621c7bb47b93750c2b9ea08d18446c122",
    "0x224a28e5a35385a7c5198169e405d9ea0fc7da8b93ee13b6d5f7d099e299520e",
    "0x0f7411b465e600eed8afdd6afca49c3036f33ecbd9a0f97823796b993bbd82f7",
    "0x0f9d0d5aad2c9555a2be7150392d8d9819b208ae3370f99a0626f9ff5d90e4e3",
    "0x1e9a96dc8292bb596f52a59538d329229732b25259cf744b6a12d30702d6fba0",
    "0x08780514ccd90380887d578c45555e593cfe52eab4b945c6c2cd4d528fb3fe3c",
    "0x272498fced686c7ac8149fa3f73ef8c2ced64717e3556d5a59f119d629ccb5fc",
    "0x01ef8f9dd7c93aac4b7cb80930bd06eb45bd350aff585f10e3d0ef8a782ef7df",
    "0x045b9f59b6595e614dc08f222b469b138e886e64bf3c40aa97ea0ae754934d30",
    "0x0ac1e91c57d9da919fd6f59d2a40ff8ea3e41e24e247a387adf2584295d61c66",
    "0x028a1621a94054b0c7f9a421353cd89d0fd67061aee99979d12e68f04e62d134",
    "0x26b41802c071ea4c9632647ed059236e50c19c3fb3c96d09d02aae2a0dcd9dbc",
    "0x2fb5dda8072bb72cbaac2f63e468215e05c9de06758db6a94af34384aedb462b",
    "0x2212d3a0f5fccaf244ff3547fd823249ad8ab8ba2a18d383dd05c56ee894d850",
    "0x1b041ad5b2f0684258e4dfaeea09be56a3276fdb19f44c015cd0c7eed465e2e3",
    "0x0a01776bb22f4b6b8eccff33e76fded3144fb7e3ac14e846a91e64afb1500eff",
    "0x2b7b5674aaecc3cbf34d3f275066d549a4f33ae8c15cf827f7936440810ace43",
    "0x29d299b80cd4489e4cf75779ed54b48c60b042257b78fc004c1b803381a3bdfd",
    "0x1c46831d9a74529357641c219d721a74a427110032b5e1dd19dde30424be401e",
    "0x06d7626c953ccb72f37141dc34d578e036296c0657674f80739ae1d883e91269",
    "0x28ffddc86f18c136c54002748e0c410edc5c440a3022cd960f108c71cda2930c",
    "0x2e67f7ee5e4aa295f85deed09e400b17be67f1b7ed2ab6adb8ec0619f6fbc5e9",
    "0x26ce38fa636c90630e97f25114a79a2dca56859ef759e53ce7abf22c24e80f27",
    "0x2e6e07c3c95bf7c34dd7a01d00a7ffec42cb3d16a1f72721afacb4c4cfd35db1",
    "0x2aa74f7597f0c9f45f91d7961c3a54fb8890d276612e1246384b1470da24d8cc",
    "0x287d681a46a2faae2c7c090f668ab45b8a71313c1509183e2ec0ca639b7f73fe",
    "0x212bd19df812eaaef4a40600528f3d7da5d3106ff565aa3b11e29f3305e73c04",
    "0x1154f7cf519186bf1aafb14b350eb860f97fd9740926dab93809c28404713504",
    "0x1dff6385cb31f1c24637810a4bd1b16fbf5152905be36583da747e79661fc207",
    "0x0e444582d22b4e76c081d34c44c18e424011a34d5476252863ea3c606b551e5c",
    "0x0323c9e433ba66c4abab6638328f02f1815773e9c2846323ff72d3aab7e4eff8",
    "0x12746bbd71791059193bba79cdec448f25b8cf002740112db70f2c6876a9c29d",
    "0x1173b7d112c2a798fd9b9d3751842c75d466c837cf50d73efd049eb4438a2240",
    "0x13d51c1090a1ad4876d1e555d7fed13da8e5713b25026ebe5fdb4808703243da",
    "0x00874c1344a4ad51ff8dcb7cbd2d9743cb72743f0394efe7f4a58ebeb956baa1",
    "0x22df22131aaab85865ce236b07f244fa0eea48d3546e97d6a32a562074fef08f",
    "0x0bf964d2dbd25b908708b437a445fc3e984524a59101e6c18bf5eb05a919f155",
    "0x09b18d9b917a55bca302be1f7f181e0e640b9d73a9ab298c69b435b5fc502f32",
    "0x094f5534444fae36a4bfc1d5bf3dc05bfbbbc70a6365366dd6745a5067289e43",
    "0x2999bab1a5f25210519fa6622af53a15a3e240c0da5701cb784fddc0dc23f01f",
    "0x2f6898c07581f6371ca94db73710e88084301bce8a93d13669575a11b03a3d23",
    "0x07268eaaba08bc19ec16d7e1318a4740565deb1e8e5742f862174b1a6866fccb",
    "0x186279b003454db01339ff77113bc9eb62603e078e1c6689a6c9582c41a0529f",
    "0x18a3f736509197d6e4915bdd04d3e5ddb67e2cc5de9a22750768e5524737172c",
    "0x0a21fa1988cf38d877cc1e2ed24c808c725e2d4bcb2d3a007b5987b87085671d",
    "0x15b285cbe26c467f1faf5ef6a64625228328c184a2c43bc00b36a135e785fba2",
    "0x164b7062c4671cf08c08b8c3f9806d560b7775b7c902f5788cd28de3e779f161",
    "0x0890ba0819ac0a6f86d9865fe7e50ef361c61d3d43b6e65d7a24f651249baa70",
    "0x2fbea4d65d7ed425a42712e5a721e4eaa627ac5cb0eb878ccc2ee0aed543e922",
    "0x0492bf383c36fa55540303a3b536f85e7b70a58e854ab9b9103d7f5f379abaaa",
    "0x05e91fe944e944104e20251c565142d61d6185a9ce85675f6a969d56292dc24e",
    "0x12fe5c2029e4b33893d463cb041acad0995b9621e6e49c3b7e380a76e36e6c1c",
    "0x024154adf0255d47958f7723921474131f2629fadc89496906cd01dc6fa0784e",
    "0x18824a09e6afaf4a36ed2462a86bd0bad798815644f2bbde8813c13457a45550",
    "0x0c8b482dba0ad51be9f255de0c3dbddddf84a630af68d50bbb06983e3d5d58a5",
    "0x17325fd0ab635871363e0a1667d3b67c5a4fa67fcd6aaf86441392878fdb05e6",
    "0x050ae95f6d2f1519122f5af67b690f31e550773fa8d18bf71cc6d0e911fa402e",
    "0x0f0d139a0e81e943038cb288d62636764bbb6295f07569885771ec84edc50c40",
    "0x1c0f8697795689cdf70fd2f2c0f93d1a79b39ebc7a1b1c549dbbca7b8e747cd6",
    "0x2bd0f940ad936b796d2bc2e048bc979e49be23a4b13598f9fe536a16dc1d81e6",
    "0x27eb1be27c9c4e934778c09a0053337fa06ebb275e096d167ce54d1e96ee62cb",
    "0x2e4889d830a67e5a8f96bdd3155a7ca3284fbd307d1f71b0f151be62548e2aea",
    "0x193fe3db0ab47d3c5d2ec5e9c5bd9983c9891f2cadc165db6064bbe6fcc1e305",
    "0x2bf3086e96c36c7bce415907ad0c40ed6e9661c009679e4e37cb13027c83e525",
    "0x12f16e2de6d4ad46a98cdb697c6cad5dd5e7e413f741ccf29ff2ea486e59bb28",
    "0x2a72147d230119f3a0262e3653ddd19f33f3d5d6ec6c4bf0ad919b0343b92d2f",
    "0x21be0e2c4bfd64e56dc47f957806dc5f0a2d9bcc26412e2977df79acc10ba974",
    "0x0e2d7e1dc946d70b2749a3b54367b25a71b84fb911aa57ae137fd4b6c21b444a",
    "0x2667f7fb5a4fa1246170a745d8a4188cc31adb0eae3325dc9f3f07d4b92b3e2e",
    "0x2ccc6f431fb7400730a783b66064697a1550c12b08dfeb72830e107da78e3405",
    "0x08888a94fc5a2ca34f0201462420001fae6dbee9e8ca0c242ec50621e38e6e5d",
    "0x02977b34eeaa3cb6ad40dd42c9b6fdd7a0d2fbe753af88b36acfcd3ccbc53f2a",
    "0x120ccce13d28b75cfd6fb6c9ea13a648bfcfe0d7e6ff8e9610b5e9f971e16b9a",
    "0x09fad2269c4a8e93c81e1b9770ea098c92787a4575b2bd73a0bf2af32f86ff3c",
    "0x026091fd3d4c44d50a4b310e4ac6f0fa0debdb70775eeb8af630cffb60092d6f",
    "0x29404aa2ba565b77bb7fba9dfb6fc3212543cc56afad6afcb904fd2bca893994",
    "0x2749475c399aaf39d4e87c2548695b4ef1ffd86590e0827de7201351b7c883f9",
    "0x098c842322479f7239912b50424685cba2ebe2dc2e4da70ac7557dab65ffa222",
    "0x18cef581222b647e31238e57fead7d5c758ace14c93c4da40191d0c053b51936",
    "0x13177839c68a5080d4e746745e43711d3cbc0ca4a108f98d63b2aa681698de60",
    "0x020ca696f531e43ec088f56f4b74325626cc4df712c0e5f0a907d88e5f0deffd",
    "0x27230eede9cccfc9fa805a30fc548db693d13708c646841d16e028387c7ac022",
    "0x01645911c1198b01d64fde34a342a1786497c05969a015439057d2fe75bb281c",
    "0x2c323fe16481bf496e439c88341ce25f198971e14487056cfdca4a451a5d8643",
    "0x0fc082dfe70728e8450bd2074c3e22e1b022c124d3bffe8b5af88ae6db5085c8",
    "0x2052c174800db209d8cdca568dcc25b3be9642116ac4c77efe8a488b423521ee",
    "0x28e420e10df2fbb5af96d621d55423190be351ce8129065a8dd9fd05b3ece9c0",
    "0x25698ca5e24a1b799f783c4462a24db655d6ae1bdacd1cb549d6e0bc3ae5069a",
    "0x160a9981a5c89a57cf8ffbfa57d51049a297b61074422ac134d9b857d6984d35",
    "0x21c91a39e145c3bc34d9b694b843f3bf8b7cebf59ddbb0a064642b069997f3d4",
    "0x1ac8d80dcd5ee876d2b09345ef112345d6eaa029d93f03b6d10975461e41734c",
    "0x0ab3e6ad0ecf8b8e7c1662a4174c52225d822895e2755544b8dbcea5657ce02c",
    "0x1c675182512620ae27e3b0b917b3a21ca52ef3ef5909b4e1c5b2237cbdab3377",
    "0x2cdbc998dfd7affd3d948d0c85bad2e2e37a4a3e07a7d75d0c8a9092ac2bed45",
    "0x23b584a56e2117b0774bf67cc0dee33324337350309dff833e491a133bb63b2e",
    "0x1e9e2b310f60ba9f8cb73030a3c9d2a10d133bc6ba4ec1152f3d20de1465e9a5",
    "0x0e01e365ba5b3031abc3e720140ae746c9ab5dab987520c460bcd4f1fa5b22db",
    "0x040884cdcfc64bfc7b7127340498d5c443382011b61c9a4b1387d85bc1264e68",
    "0x190b1ee1205eb9500c74a3998f2bea36353f1724d6067ed0a0a17de311ef9668",
    "0x1647c72aec6c4388d04f52fc23cd9c08c1dfcf65ce61e165fc28d1f832bd3b2c",
    "0x2430006346a0145f799880cc4c8736269f5494d89fb48b02842e595b71e4541d",
    "0x177b9a08343917e1365107a3da3ae7f69d853902bb16bacb3221850252b757af",
    "0x04a420e642b11ae94e58862a68f5e32609cd53d0ae29423439b11d04666df4f8",
    "0x25d0e0f739fb39fc105a88fab0afd810de2461858e956ccccdfabeddb6a25c8f",
    "0x04476d91b7eff2fd85905cbf58651edc320cb15610eaed452c4d4ffa0c740a27",
    "0x1090c0b68b3d7d7b8bc9ca2419eb8dea1c28f6d5e1250cb5e9780fd9ca286fae",
    "0x25393ce3b9256d50448a725c5c7cd5ad376f2d435855c10ebf2899cb5c6617be",
    "0x25931c0c7371f4f1fc862f306e6e5830ed824388d6b9342697d144f0fab46630",
    "0x2396cb501700bbe6c82aad51b0fb79cf8a4d353185d5808203f73f22afbf62f6",
    "0x26a363483348b58954ea748a7129a7b0a3dc9068c3cca7b5b3f0ce03b8724884",
    "0x27ca107ca204f2a18d6f1535b92c5478c99b893334215f6ba7a0e5b45fcd6897",
    "0x26da28fc097ed77ce4662bde326b2cceac15f7301178581d8d2d02b3b2d91056",
    "0x056ab351691d8bb3703e3055070ac9cc655774c1bb35d57572971ba56ee0cb89",
    "0x2638b57f23b754aec76d109a2f481aa3c22547a11ffc50152d729af632376a90",
    "0x304754bb8c57d60732f492c2605184fdc33e46a532bdec80ea7bc5519ede7cef",
    "0x00d1727f8457ee03514f155b5806cbf748ec6857fc554010752ac93a9b7619ac",
    "0x00ee1f3c66fbc05c43ba295a303c72fab5bca86805ec9419c588e50947761fa3",
    "0x0afafadcf5b4dd4a4a76b5a1d82415fd10a19fbcfc59078c61f9297eb675d972",
    "0x0b2449f39746085e86ce45e8eed108ee65a234835a0a6a5ea8996d124dd04d0a",
    "0x206b0ce2f1b2c5b7c9f37b0045227095f6c6f071ec3bdda76a7ddf4823dd5dd6",
    "0x0feba4fb87834c7cb696e67433628cd6caffc3a4ef20fea852c7e1029459409c",
    "0x254dbfac74c49b0b8926752e084e02513b06f1315e6d70e18173e972336e55d3",
    "0x0addb1372cee4e164655168c367559e19606c5bd17910aeb37719edfa0ca8762",
    "0x26b25b7e257f3e97c799024fb019f65c6ca4d8d81b1ae16221a589d68831d759",
    "0x090995b79acec240413b8d4c658787e5a4657b9ab00bdb5b1960b1059e113ba3",
    "0x08dbdc2e21ef11f2c57299687843cea3eb0d8e40e99131f42974178d44f73b7b",
    "0x09e8aba671481197679faf752a0f78e342fe9c491596ab6758f170939785179f",
    "0x1deb05180e833e45659052a7ebaf816c7efd12a7f9eec94b7bc7c683f1363d5c",
    "0x19a70ec6bdfc9098a926efbcc04aa9ee248997e8b2c24af335fd6523e5250879",
    "0x21d773660adafb8a879986f9aab4890566353a3777d8a3f1eb93abe10bbf1f64",
    "0x09f1890f72e9dc713e20ba637b89d5d397a6b01fcd667347f6f46617841c3901",
    "0x05af459361eb454d2a300c61e446998d48fa1f897bf219d608c2145c33b111c3",
    "0x0fa1a1d6829f0345664a66dc75a657335f336f15f340756cfa12fc850cc8b513",
    "0x02e47a35bcc0c3a0bda0b1c0307ad543f4280fcf87f636f853655cf97a628bb0",
    "0x14f773e9834c6bdeb8f90e78bf4c24b7203411460112491036621895204d0f12",
    "0x102d98cf502ed843255cf19d29bc7d8e642abe7cfd639992ffb091962fc8f7cc",
    "0x043dd5f4aa5a76dd4c47f6c65da7ca2320d4c73ad3294738cba686a7e91373c2",
    "0x21833819c3337194a6c0d29a48d4f2676f0e7c79743a306f4cfdb2b26bd11efa",
    "0x0f281925cf5ee649b474a6819d116ca3eb4eca246c311ecadc53262a3cff2b53",
    "0x0d3e2477a7b10beb44709c7746d6824edf625dd60504d5dc93ce662f15c238d6",
    "0x2cd7f641bedbf66956ff8a01be9cde35d80f80ab51e73b49acbfc3eff5aefc44",
    "0x29e95b492bf2f95f4d09380f98b74e389149d24045811d7a86dd861310463cf8",
    "0x22da66bc62e8f011266efca86a6c810f9ae4c51af6ffeb57f8b3c50df83cc13e",
    "0x0fe6d30de7a82d163023491794f4aca3220db79e8129df3643072d841925554a",
    "0x0050e842a1299909123c46eff185c23ad312d03fef1adfecc7e07ecb298fd67f",
    "0x2130a3a7b3221222be34cc53a42d7733666f9ddf714ed7c5885cbbdb63108c21",
    "0x2df9ee294edf99e3d8d5883fe0566c24aa66731f34a93280e1d328e67b33c9fa",
    "0x1bf7d6e489ad8c0cf26eb68cc21ff54158132396dc250aeba4b6fc5fc3372762",
    "0x0c602fa155be958761eaf739617ab136cf7b807728bf7fe35d4778d311780e54",
    "0x2e50e2c5b36aa20532407d86b8d22d7d5154080a24972faeb63faf0121ed7f21",
    "0x17c2510982a7b5825710d6290ec4f782f674995ee8409b42b459123b180332e1",
    "0x0b0d52f03c8af7276803ecf2465b885b21337b538eabd2f6b2ab255f376b42a8",
    "0x0f5633df1972b9455953d88a63f80647a9ac77c6c0f85d4561972dd8fab8bd14",
)


def raw_constants_head() -> tuple[str, ...]:
    """Return the leading round constants as ``0x``-prefixed hex strings."""
    return _ROUND_CONSTANTS_HEAD